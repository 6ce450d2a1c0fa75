from .wallet_config import WalletConfig, DEFAULT_CONFIG

__all__ = ['WalletConfig', 'DEFAULT_CONFIG']
