from __future__ import annotations

from pydantic import BaseModel

from orca_api.schemas.wire import U8, U64, RawJsonText, wire_model_config


class Token(BaseModel):
    """On-chain token record.

    ``extensions``, ``metadata``, ``stats`` and ``tags`` are returned as raw
    JSON text; their layout is owned by the server and may change without
    notice.
    """

    model_config = wire_model_config(
        {
            "freeze_authority": "freezeAuthority",
            "is_initialized": "isInitialized",
            "mint_authority": "mintAuthority",
            "price_usdc": "priceUsdc",
            "token_program": "tokenProgram",
            "updated_at": "updatedAt",
            "updated_epoch": "updatedEpoch",
        }
    )

    address: str
    decimals: U8
    extensions: RawJsonText
    freeze_authority: str | None = None
    is_initialized: bool
    metadata: RawJsonText
    mint_authority: str | None = None
    price_usdc: str
    stats: RawJsonText
    supply: str
    tags: RawJsonText
    token_program: str
    updated_at: str
    updated_epoch: U64


class LockInfo(BaseModel):
    model_config = wire_model_config({"locked_percentage": "lockedPercentage"})

    locked_percentage: str
    name: str
