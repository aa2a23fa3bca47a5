"""Allow ``python -m less_compiler``."""

from less_compiler.cli import main

if __name__ == "__main__":
    main()
