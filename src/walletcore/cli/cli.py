# src/walletcore/cli/cli.py
import argparse
import sys
from typing import List, Optional

from ..config.wallet_config import WalletConfig
from ..exceptions import InsufficientFundsError, InvalidSignatureError, WalletCoreError
from ..utils.logger import get_logger, setup_logging
from ..wallet.directory import InMemoryKeyDirectory
from ..wallet.transaction import Transaction
from ..wallet.wallet import Wallet

logger = get_logger(__name__)

class CLI:
    def __init__(self):
        self.config: Optional[WalletConfig] = None
        self.directory = InMemoryKeyDirectory()

    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 1

        try:
            self.config = WalletConfig(args.config)
            setup_logging(args.log_level or self.config.log_level, self.config.log_dir)
            self.directory = InMemoryKeyDirectory(self.config.address_length)
            return args.func(args)
        except WalletCoreError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='walletcore CLI')
        parser.add_argument('--config', default=None, help='Path to a YAML configuration file')
        parser.add_argument('--log-level', default=None, help='Override the configured log level')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        create_wallet = subparsers.add_parser('create', help='Create new wallet')
        create_wallet.set_defaults(func=self.create_wallet)

        demo = subparsers.add_parser('demo', help='Run an issuance and transfer between two wallets')
        demo.add_argument('--issue', type=int, default=1000, help='Amount issued to the first wallet')
        demo.add_argument('--send', type=int, default=500, help='Amount sent to the second wallet')
        demo.set_defaults(func=self.run_demo)

        return parser

    def _new_wallet(self) -> Wallet:
        return Wallet(key_directory=self.directory, config=self.config)

    def create_wallet(self, args) -> int:
        wallet = self._new_wallet()
        print("Created new wallet")
        print(f"Address: {wallet.get_address()}")
        print(f"Public key:\n{wallet.export_public_key()}")
        return 0

    def run_demo(self, args) -> int:
        sender = self._new_wallet()
        recipient = self._new_wallet()
        print(f"Sender address: {sender.get_address()}")
        print(f"Recipient address: {recipient.get_address()}")

        sender.accept_issuance(Transaction.issuance(sender.get_address(), args.issue))
        print(f"Initial balance: {sender.get_balance()}")

        try:
            tx = sender.send_funds(recipient.get_address(), args.send)
        except InsufficientFundsError as e:
            print(f"Send rejected: {e}")
            return 1
        recipient.receive_funds(tx)
        print(f"Transaction sent: {tx.id}")
        print(f"Sender balance: {sender.get_balance()}")
        print(f"Recipient balance: {recipient.get_balance()}")

        forged = tx.model_copy(update={"amount": tx.amount + 1})
        try:
            recipient.receive_funds(forged)
        except InvalidSignatureError as e:
            logger.info(f"Tampered copy rejected: {e}")
            print("Tampered copy rejected")
        return 0

def main():
    cli = CLI()
    sys.exit(cli.main(sys.argv[1:]))

if __name__ == "__main__":
    main()
