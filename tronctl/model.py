"""Detailed account view and its resource records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ResourceCode(IntEnum):
    """Kinds of resource gained by freezing TRX."""

    BANDWIDTH = 0
    ENERGY = 1
    TRON_POWER = 2


@dataclass
class FrozenResource:
    """TRX frozen by an account, possibly delegated to another one."""

    type: ResourceCode
    amount: int
    delegate_to: str = ""
    expire: int = 0

    def _json(self) -> dict:
        return {
            "Type": int(self.type),
            "Amount": self.amount,
            "DelegateTo": self.delegate_to,
            "Expire": self.expire,
        }


@dataclass
class UnfrozenResource:
    """TRX being unfrozen by an account."""

    type: ResourceCode
    amount: int
    expire: int = 0

    def _json(self) -> dict:
        return {"Type": int(self.type), "Amount": self.amount, "Expire": self.expire}


@dataclass
class AccountDetails:
    """Detailed view of an account."""

    address: str = ""
    type: str = ""
    name: str = ""
    id: str = ""
    balance: int = 0
    allowance: int = 0
    last_withdraw: int = 0
    is_witness: bool = False
    is_elected: bool = False
    assets: dict[str, int] = field(default_factory=dict)
    tron_power: int = 0
    tron_power_used: int = 0
    frozen_balance: int = 0
    frozen_resources: list[FrozenResource] = field(default_factory=list)
    frozen_balance_v2: int = 0
    frozen_resources_v2: list[FrozenResource] = field(default_factory=list)
    unfrozen_resources: list[UnfrozenResource] = field(default_factory=list)
    votes: dict[str, int] = field(default_factory=dict)
    bw_total: int = 0
    bw_used: int = 0
    energy_total: int = 0
    energy_used: int = 0
    rewards: int = 0
    withdrawable_balance: int = 0
    unfreeze_left: int = 0
    max_can_delegate_bandwidth: int = 0
    max_can_delegate_energy: int = 0

    def to_json_dict(self) -> dict:
        """Return the account as a dict keyed by its JSON field names."""
        return {
            "address": self.address,
            "type": self.type,
            "name": self.name,
            "id": self.id,
            "balance": self.balance,
            "allowance": self.allowance,
            "lastWithdraw": self.last_withdraw,
            "isWitness": self.is_witness,
            "isElected": self.is_elected,
            "assetList": dict(self.assets),
            "tronPower": self.tron_power,
            "tronPowerUsed": self.tron_power_used,
            "frozenBalance": self.frozen_balance,
            "frozenList": [r._json() for r in self.frozen_resources],
            "frozenBalanceV2": self.frozen_balance_v2,
            "frozenListV2": [r._json() for r in self.frozen_resources_v2],
            "unfrozenList": [r._json() for r in self.unfrozen_resources],
            "voteList": dict(self.votes),
            "bandwidthTotal": self.bw_total,
            "bandwidthUsed": self.bw_used,
            "energyTotal": self.energy_total,
            "energyUsed": self.energy_used,
            "rewards": self.rewards,
            "withdrawableBalance": self.withdrawable_balance,
            "countUnfreezeLeft": self.unfreeze_left,
            "maxCanDelegateBandwidth": self.max_can_delegate_bandwidth,
            "maxCanDelegateEnergy": self.max_can_delegate_energy,
        }