"""
run_merge.py — CLI Entry Point

This script forwards execution to the CLI logic defined in
`src/merge_images/cli.py`.

Usage:
    python run_merge.py --layout waterfall a.jpg b.png c.gif --out merged.jpg

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import merge_images.cli as mi_cli

if __name__ == "__main__":
    sys.exit(mi_cli.main())
