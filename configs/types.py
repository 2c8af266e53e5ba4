from typing import Literal


LLMProvider = Literal[
    "gemini",
    "openai",
]

ConnectionPolicy = Literal[
    "per_call",
    "pooled",
]
