"""Member domain model — only the reward wallet used by orders."""

from dataclasses import dataclass

from src.vc_common.errors import RewardNotEnoughError


@dataclass
class Member:
    id: int
    reward: int = 0

    def check_reward(self, amount: int) -> None:
        if self.reward < amount:
            raise RewardNotEnoughError(amount, self.reward)

    def add_reward(self, amount: int) -> None:
        self.reward += amount

    def minus_reward(self, amount: int) -> None:
        self.check_reward(amount)
        self.reward -= amount
