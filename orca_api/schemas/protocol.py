from __future__ import annotations

from pydantic import BaseModel

from orca_api.schemas.wire import wire_model_config


class ProtocolInfo(BaseModel):
    model_config = wire_model_config(
        {
            "fees_24h_usdc": "fees24hUsdc",
            "revenue_24h_usdc": "revenue24hUsdc",
            "volume_24h_usdc": "volume24hUsdc",
        }
    )

    fees_24h_usdc: str
    revenue_24h_usdc: str
    tvl: str
    volume_24h_usdc: str


class TokenVolume(BaseModel):
    model_config = wire_model_config({})

    volume: str


class TokenStats(BaseModel):
    model_config = wire_model_config({"h24": "24h"})

    h24: TokenVolume


class TokenInfo(BaseModel):
    """Protocol token metadata with its 24h trading stats."""

    model_config = wire_model_config(
        {
            "circulating_supply": "circulatingSupply",
            "image_url": "imageUrl",
            "total_supply": "totalSupply",
        }
    )

    circulating_supply: str
    description: str
    image_url: str
    name: str
    price: str
    stats: TokenStats
    symbol: str
    total_supply: str


# The supply endpoints answer with snake_case keys.
class CirculatingSupplyResponse(BaseModel):
    model_config = wire_model_config({})

    circulating_supply: str


class TotalSupplyResponse(BaseModel):
    model_config = wire_model_config({})

    total_supply: str
