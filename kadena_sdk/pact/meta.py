"""
Public metadata of a Pact command.
"""
import time

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

DEFAULT_GAS_LIMIT = 1500
DEFAULT_GAS_PRICE = 0.00000001
DEFAULT_TTL = 3600  # 1 hour


def _now() -> int:
    return int(time.time())


class Meta(BaseModel):
    """
    Execution parameters for a command: target chain, gas payer, gas and
    time-to-live. Field order matches the wire format.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chain_id: str = Field(..., alias="chainId")
    sender: str
    gas_limit: NonNegativeInt = Field(DEFAULT_GAS_LIMIT, alias="gasLimit")
    gas_price: float = Field(DEFAULT_GAS_PRICE, alias="gasPrice", allow_inf_nan=False)
    ttl: NonNegativeInt = DEFAULT_TTL
    creation_time: NonNegativeInt = Field(default_factory=_now, alias="creationTime")

    @classmethod
    def new(cls, chain_id: str, sender: str) -> "Meta":
        """
        Create metadata with the common defaults.

        gas_limit=1500, gas_price=0.00000001 and ttl=3600; creation_time is
        captured now and never recomputed.

        Args:
            chain_id: Chain the command executes on, e.g. "0"
            sender: Gas payer account, e.g. "k:<public key>"
        """
        return cls(chain_id=chain_id, sender=sender)

    @classmethod
    def with_params(
        cls,
        chain_id: str,
        sender: str,
        gas_limit: int,
        gas_price: float,
        ttl: int,
        creation_time: int
    ) -> "Meta":
        """Create metadata with every field given explicitly."""
        return cls(
            chain_id=chain_id,
            sender=sender,
            gas_limit=gas_limit,
            gas_price=gas_price,
            ttl=ttl,
            creation_time=creation_time,
        )

    def with_gas_limit(self, gas_limit: int) -> "Meta":
        return self._replace(gas_limit=gas_limit)

    def with_gas_price(self, gas_price: float) -> "Meta":
        return self._replace(gas_price=gas_price)

    def with_ttl(self, ttl: int) -> "Meta":
        return self._replace(ttl=ttl)

    def with_creation_time(self, creation_time: int) -> "Meta":
        return self._replace(creation_time=creation_time)

    def _replace(self, **update) -> "Meta":
        return self.model_validate({**dict(self), **update})
