# Area: Chain
"""Game contract ABI fragments used by the read-only client."""

GAME_INFO_FUNCTION = "getCurrentGameInfo"

# Output order of getCurrentGameInfo(), mapped onto GameInfo aliases
GAME_INFO_FIELDS = (
    "gameNumber",
    "difficulty",
    "prizePool",
    "drawTime",
    "timeUntilDraw",
)

GAME_ABI = [
    {
        "type": "function",
        "name": GAME_INFO_FUNCTION,
        "stateMutability": "view",
        "inputs": [],
        "outputs": [
            {"name": name, "type": "uint256", "internalType": "uint256"}
            for name in GAME_INFO_FIELDS
        ],
    },
]
