"""CLI: python -m lispread <expr>"""

from .cli import main

if __name__ == "__main__":
    main()
