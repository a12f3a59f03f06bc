"""Accounts — user and admin identity records.

Invariants:
    - UserAccount.email is always lower-cased (uniqueness is case-insensitive)
    - secret_hash never leaves the account store: public() strips it
    - AdminIdentity is a single configured identity, never a collection
"""

from dataclasses import asdict, dataclass

from marketplace.core.domain_types import UserId


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass
class UserAccount:
    """Registered user, as persisted by the account store."""
    id: UserId
    email: str
    postal_code: str
    university: str
    created_at: str
    secret_hash: str

    def to_record(self) -> dict:
        return asdict(self)

    @classmethod
    def from_record(cls, record: dict) -> "UserAccount":
        return cls(
            id=UserId(record["id"]),
            email=record["email"],
            postal_code=record["postal_code"],
            university=record["university"],
            created_at=record["created_at"],
            secret_hash=record["secret_hash"],
        )

    def public(self) -> dict:
        """User record without the credential secret."""
        record = self.to_record()
        record.pop("secret_hash")
        return record


@dataclass
class AdminIdentity:
    """Authenticated admin; token is the opaque session handle."""
    id: str
    username: str
    token: str

    def to_record(self) -> dict:
        return asdict(self)

    @classmethod
    def from_record(cls, record: dict) -> "AdminIdentity":
        return cls(
            id=record["id"], username=record["username"], token=record["token"],
        )
