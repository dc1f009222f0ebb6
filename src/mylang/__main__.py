"""Allow running mylang as a module: python -m mylang"""

from mylang.cli import main

if __name__ == "__main__":
    main()
