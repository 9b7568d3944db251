# src/sic2lp/__main__.py

import sys
import traceback

# --- Import Handling ---
try:
    from sic2lp import cli
except ImportError as e:
    # Print detailed debugging information to stderr if imports fail
    print("--- Debug Information ---", file=sys.stderr)
    traceback.print_exc()
    print("-------------------------", file=sys.stderr)

    print(
        f"Fatal Error: Could not import a required submodule.\n"
        f"Please ensure the project structure is correct and dependencies are installed.\n"
        f"Details: {e}",
        file=sys.stderr
    )
    sys.exit(1)


def main():
    cli.main()


if __name__ == "__main__":
    main()
