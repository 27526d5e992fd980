import sys

import Tree_Hash.cli.treehash as treehash_cli


def main():
    sys.exit(treehash_cli.main())


if __name__ == "__main__":
    main()
