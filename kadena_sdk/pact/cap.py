"""
Capabilities granted to command signers.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_validator


class Cap(BaseModel):
    """A named capability with positional arguments"""
    model_config = ConfigDict(frozen=True)

    name: str
    args: List[Any] = []

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Capability name must not be empty")
        return v

    @classmethod
    def new(cls, name: str) -> "Cap":
        """Create a capability without arguments, e.g. ``Cap.new("coin.GAS")``."""
        return cls(name=name)

    @classmethod
    def with_args(cls, name: str, args: List[Any]) -> "Cap":
        """Create a capability with the given arguments, order preserved."""
        return cls(name=name, args=list(args))

    @classmethod
    def transfer(cls, sender: str, receiver: str, amount: float) -> "Cap":
        """
        Create a ``coin.TRANSFER`` capability.

        Args:
            sender: Account the funds leave
            receiver: Account the funds go to
            amount: Amount to transfer

        Returns:
            Cap with args ``[sender, receiver, amount]``
        """
        return cls.with_args("coin.TRANSFER", [sender, receiver, amount])

    def add_arg(self, arg: Any) -> "Cap":
        """Return a copy of this capability with ``arg`` appended."""
        return self.model_validate({**dict(self), "args": [*self.args, arg]})
