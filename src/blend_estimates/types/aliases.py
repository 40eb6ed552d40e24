from typing import TypeAlias

AssetId: TypeAlias = str
ContractId: TypeAlias = str
LedgerSequence: TypeAlias = int
ReserveIndex: TypeAlias = int
Timestamp: TypeAlias = int
