import sys

from plagcheck.cli import main

if __name__ == "__main__":
    # Usage: python main.py <original.txt> <plagiarized.txt> <output.txt>
    sys.exit(main())
