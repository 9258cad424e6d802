"""
lotto_cli.types — Game state models
====================================

The contract's `getCurrentGameInfo()` result, decoded into a model.
Fields accept the contract's camelCase names as aliases:

    >>> GameInfo.model_validate({"gameNumber": 42, "difficulty": 3, ...})
"""

from pydantic import BaseModel, ConfigDict, Field


class GameInfo(BaseModel):
    """Snapshot of the current game round.

    Fields
    ------
    game_number : int
        Round identifier, e.g. 42.
    difficulty : int
        Contract-defined difficulty parameter.
    prize_pool : int
        Accumulated prize in wei.
    draw_time : int
        Unix timestamp (seconds) of the earliest next draw.
    time_until_draw : int
        Seconds remaining until draw_time. Zero once the draw is open.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    game_number: int = Field(alias="gameNumber", ge=0)
    difficulty: int = Field(ge=0)
    prize_pool: int = Field(alias="prizePool", ge=0)
    draw_time: int = Field(alias="drawTime", ge=0)
    time_until_draw: int = Field(alias="timeUntilDraw")
