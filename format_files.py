"""
Regenerate the reference doc, then run black and ruff over src/ and tests/.

Exits non-zero if any step fails. The generated doc is excluded from
formatting so it stays exactly what 'help documentation' writes.
"""

import subprocess
import sys

TARGETS = ["src/", "tests/"]
DOC_PATH = "src/mobile_bootstrap/doc.py"


def run(args):
    cmd = [sys.executable, "-m"] + args
    print(f"$ {' '.join(cmd)}")
    result = subprocess.run(cmd, capture_output=False)
    return result.returncode


def main():
    doc_rc = run(["mobile_bootstrap", "help", "documentation", DOC_PATH])
    black_rc = run(["black", "--extend-exclude", r"/doc\.py$"] + TARGETS)
    ruff_rc = run(["ruff", "check", "--fix", "--extend-exclude", DOC_PATH] + TARGETS)

    if doc_rc != 0 or black_rc != 0 or ruff_rc != 0:
        print("\nFormatting failed.")
        sys.exit(1)

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
