from typing import Literal

Category = Literal[
    "Pop",
    "Science",
    "Sports",
    "Rock",
]

AnswerOutcome = Literal["correct", "wrong"]
