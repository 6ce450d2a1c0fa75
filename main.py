# main.py
import sys

from walletcore.cli.cli import CLI

def main():
    # Two wallets, one issuance, one signed transfer
    sys.exit(CLI().main(["demo", *sys.argv[1:]]))

if __name__ == "__main__":
    main()
