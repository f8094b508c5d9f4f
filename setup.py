"""
Build script for html5serial with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    HTML5SERIAL_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import find_packages, setup

# Determine if we should use mypyc
USE_MYPYC = os.environ.get("HTML5SERIAL_USE_MYPYC", "0") == "1"

# Modules on the serialization hot path.
# Note: node.py and dom.py stay interpreted; they are not on the hot path.
MYPYC_MODULES = [
    "src/html5serial/serializer.py",
    "src/html5serial/entities.py",
    "src/html5serial/elements.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install html5serial[mypyc]", file=sys.stderr)
        sys.exit(1)

    # Verify all modules exist
    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print("=" * 70)
    print("Building html5serial with mypyc compilation")
    print("=" * 70)
    print(f"Compiling {len(MYPYC_MODULES)} modules:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")
    print("=" * 70)

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    debug_level = os.environ.get("MYPYC_DEBUG_LEVEL", "0")

    mypyc_options = {
        "opt_level": opt_level,
        "debug_level": debug_level,
        "verbose": True,
        "separate": False,
        "multi_file": False,
    }

    return mypycify(MYPYC_MODULES, **mypyc_options)


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()

    setup(
        name="html5serial",
        version="0.1.0",
        description="Serialize HTML5 document trees back to markup",
        python_requires=">=3.10",
        package_dir={"": "src"},
        packages=find_packages("src"),
        extras_require={
            "html5lib": ["html5lib>=1.1"],
            "test": ["pytest", "html5lib>=1.1"],
            "mypyc": ["mypy"],
        },
        entry_points={
            "console_scripts": [
                "html5serial=html5serial.__main__:main",
            ],
        },
        ext_modules=ext_modules,
    )
