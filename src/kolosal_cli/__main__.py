"""Entry point for running kolosal-cli as a module.

This allows running: python -m kolosal_cli
"""

from .cli import main

if __name__ == "__main__":
    main()
