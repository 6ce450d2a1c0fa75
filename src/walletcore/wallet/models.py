# File: src/walletcore/wallet/models.py
from pydantic import BaseModel

class WalletInfo(BaseModel):
    address: str
    public_key: str  # PEM
    balance: int
    transactions: int
