"""Build and walk a tree of chained transactions."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator, Sequence
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

_ALICE = "did:ssid:alice"
_BOB = "did:ssid:bob"
_CHARLIE = "did:ssid:charlie"
_DAVE = "did:ssid:dave"

SAMPLE_TRANSACTIONS = json.dumps(
    [
        {
            "previous_tx_hash": None,
            "amount": 10000,
            "from_did": _CHARLIE,
            "to_did": _ALICE,
            "issued_at": "2023-08-18T08:23:25.135715279Z",
            "expiry_at": "2024-08-17T08:23:25.135717653Z",
            "tx_hash": "0xa1",
            "signed_tx_hash": "0xsig-a1",
        },
        {
            "previous_tx_hash": "0xa1",
            "amount": 5000,
            "from_did": _ALICE,
            "to_did": _BOB,
            "issued_at": "2023-08-18T08:24:18.143468881Z",
            "expiry_at": "2023-08-15T08:24:18.143469914Z",
            "tx_hash": "0xb2",
            "signed_tx_hash": "0xsig-b2",
        },
        {
            "previous_tx_hash": "0xa1",
            "amount": 2000,
            "from_did": _ALICE,
            "to_did": _BOB,
            "issued_at": "2023-08-18T08:24:18.143468881Z",
            "expiry_at": "2023-08-15T08:24:18.143469914Z",
            "tx_hash": "0xb3",
            "signed_tx_hash": "0xsig-b3",
        },
        {
            "previous_tx_hash": "0xb2",
            "amount": 3000,
            "from_did": _BOB,
            "to_did": _DAVE,
            "issued_at": "2023-08-18T08:24:31.057493587Z",
            "expiry_at": "2024-08-17T08:24:31.057494651Z",
            "tx_hash": "0xc4",
            "signed_tx_hash": "0xsig-c4",
        },
        {
            "previous_tx_hash": "0xc4",
            "amount": 3000,
            "from_did": _DAVE,
            "to_did": _CHARLIE,
            "issued_at": "2023-08-18T08:25:28.546290228Z",
            "expiry_at": "2024-08-17T08:25:28.546364091Z",
            "tx_hash": "0xd5",
            "signed_tx_hash": "0xsig-d5",
        },
    ],
    indent=2,
)


@dataclass
class Transaction:
    """A single transfer, linked to its predecessor by hash."""

    previous_tx_hash: str | None
    amount: int
    from_did: str
    to_did: str
    issued_at: str
    expiry_at: str
    tx_hash: str
    signed_tx_hash: str

    @property
    def current_key(self) -> str:
        return self.tx_hash

    @property
    def previous_key(self) -> str | None:
        return self.previous_tx_hash

    @classmethod
    def from_dict(cls, data: Any) -> Transaction:
        """Validate a decoded JSON object and build a transaction from it."""
        if not isinstance(data, dict):
            raise ValueError("a transaction must be a JSON object")
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name == "previous_tx_hash":
                value = data.get(f.name)
                if value is not None and not isinstance(value, str):
                    raise ValueError("previous_tx_hash must be a string or null")
            else:
                if f.name not in data:
                    raise ValueError(f"missing field {f.name!r}")
                value = data[f.name]
                if f.name == "amount":
                    if isinstance(value, bool) or not isinstance(value, int):
                        raise ValueError("amount must be an integer")
                    if not -(2**31) <= value < 2**31:
                        raise ValueError("amount is out of range")
                elif not isinstance(value, str):
                    raise ValueError(f"field {f.name!r} must be a string")
            values[f.name] = value
        return cls(**values)


@dataclass
class TransactionNode:
    """A transaction together with the hashes of the transactions that follow it."""

    previous_tx_hash: str | None
    amount: int
    from_did: str
    to_did: str
    issued_at: str
    expiry_at: str
    tx_hash: str
    signed_tx_hash: str
    children: list[str] = field(default_factory=list)

    @property
    def current_key(self) -> str:
        return self.tx_hash

    @property
    def previous_key(self) -> str | None:
        return self.previous_tx_hash

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> TransactionNode:
        return cls(**asdict(transaction))


def load_transactions(text: str) -> list[Transaction]:
    """Parse a JSON array of transactions."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of transactions")
    return [Transaction.from_dict(item) for item in data]


def build_transaction_tree(
    transactions: Sequence[Transaction],
) -> tuple[str, dict[str, TransactionNode]]:
    """Index transactions by hash and link each to its children.

    The root is the transaction without a predecessor; "" if there is none.
    """
    tree = {
        tx.current_key: TransactionNode.from_transaction(tx) for tx in transactions
    }
    root = ""
    for tx_hash, node in tree.items():
        previous = node.previous_key
        if previous is None:
            root = tx_hash
        elif previous in tree:
            tree[previous].children.append(node.current_key)
    return root, tree


def iterate_transactions_tree(
    root: str, tree: dict[str, TransactionNode]
) -> Iterator[TransactionNode]:
    """Yield the nodes reachable from root, depth first, parents before children."""
    pending = [root]
    while pending:
        node = tree.get(pending.pop())
        if node is None:
            continue
        yield node
        pending.extend(reversed(node.children))


def main(argv: Sequence[str] | None = None) -> int:
    """Build the tree from a JSON file (or the built-in sample) and walk it."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else SAMPLE_TRANSACTIONS
    try:
        transactions = load_transactions(text)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    root, tree = build_transaction_tree(transactions)
    print(json.dumps({key: asdict(node) for key, node in tree.items()}, indent=2))
    for node in iterate_transactions_tree(root, tree):
        print(f"Validating Data: {node.current_key}")
        print(node.amount)
    return 0


if __name__ == "__main__":
    sys.exit(main())