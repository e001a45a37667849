"""
Token Metadata Documents

Marketplace-compatible JSON documents the collection URIs resolve to.
Key order matters to some marketplaces, so field order below is the
document order.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from goblet_contracts.types import (
    FIRST_CALENDAR_YEAR,
    GEMS_PER_TYPE,
    GOBLETS_PER_YEAR,
    MAX_GOBLET_SUPPLY,
    GemType,
)
from goblet_contracts.util import (
    calendar_year,
    gemstone_metadata_filename,
    gemstone_token_id,
    goblet_metadata_filename,
    goblet_year_index,
    ipfs_uri,
)


logger = logging.getLogger(__name__)

SELLER_FEE_BASIS_POINTS = 1000
GOBLET_EXTERNAL_URL = "https://maltgrainwhiskey.com"
GEMSTONE_EXTERNAL_URL = "https://www.maltgraincane.com/"
GOBLET_IMAGE_CID = "QmcNKwH4yFpUrHwVcYn2rPw4uJzeyLypdXz5oSpo8JdHq8"
GEMSTONE_IMAGE_CID = "QmQKedjazARTj4QPpUwWkRhxLBXm1mTwJzSctwyp9U5uzg"


class Attribute(BaseModel):
    """One trait entry; display_type and max_value are only set for numeric traits"""

    display_type: Optional[str] = None
    trait_type: str
    value: Union[int, str]
    max_value: Optional[int] = None


class TokenMetadata(BaseModel):
    id: str
    description: str
    external_url: str
    seller_fee_basis_points: int = SELLER_FEE_BASIS_POINTS
    image: str
    name: str
    attributes: List[Attribute] = Field(default_factory=list)

    def to_document(self) -> dict:
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_document())


def goblet_metadata(
    token_id: int,
    first_year: int = FIRST_CALENDAR_YEAR,
    image_cid: str = GOBLET_IMAGE_CID,
) -> TokenMetadata:
    year = calendar_year(token_id, first_year)
    edition = token_id - goblet_year_index(token_id) * GOBLETS_PER_YEAR
    return TokenMetadata(
        id=str(token_id),
        description=(
            f"Goblet #{token_id} of {year}, minted by redeeming a complete set of six gemstones."
        ),
        external_url=GOBLET_EXTERNAL_URL,
        image=ipfs_uri(image_cid, f"{year}.jpg"),
        name=f"Goblet #{token_id}",
        attributes=[
            Attribute(
                display_type="number",
                trait_type="Limited Edition",
                value=edition,
                max_value=GOBLETS_PER_YEAR,
            ),
            Attribute(trait_type="Year", value=str(year)),
            Attribute(trait_type="Type", value="Goblet"),
        ],
    )


def gemstone_metadata(
    gem_type: GemType,
    slot: int,
    is_redeemed: bool,
    image_cid: str = GEMSTONE_IMAGE_CID,
) -> TokenMetadata:
    gem = gem_type.display_name
    return TokenMetadata(
        id=str(slot),
        description=(
            f"{gem} #{slot} is a token minted on purchase of a case."
            " Collect all 6 tokens to be eligible to get the Goblet"
        ),
        external_url=GEMSTONE_EXTERNAL_URL,
        image=ipfs_uri(image_cid, f"{slot}.svg"),
        name=f"MultiGrain & Cane Whiskey {gem} #{slot}",
        attributes=[Attribute(trait_type="IsRedeemed", value=str(is_redeemed).lower())],
    )


def _write(directory: Path, filename: str, document: TokenMetadata) -> None:
    (directory / filename).write_text(document.to_json(), encoding="utf-8")


def write_collection_metadata(output_dir: Path, first_year: int = FIRST_CALENDAR_YEAR) -> dict:
    """
    Write every metadata document the collection URIs can resolve to.

    Layout under `output_dir`:
        goblets/{id}_{year}.json
        gemstones/unredeemed/{id:064x}.json
        gemstones/redeemed/{id:064x}.json

    Each folder is uploaded as its own CID.

    Returns:
        dict: Number of documents written per folder
    """
    goblets_dir = output_dir / "goblets"
    unredeemed_dir = output_dir / "gemstones" / "unredeemed"
    redeemed_dir = output_dir / "gemstones" / "redeemed"
    for directory in (goblets_dir, unredeemed_dir, redeemed_dir):
        directory.mkdir(parents=True, exist_ok=True)

    for token_id in range(1, MAX_GOBLET_SUPPLY + 1):
        _write(goblets_dir, goblet_metadata_filename(token_id, first_year), goblet_metadata(token_id, first_year))

    for gem_type in GemType:
        for slot in range(1, GEMS_PER_TYPE + 1):
            filename = gemstone_metadata_filename(gemstone_token_id(gem_type, slot))
            _write(unredeemed_dir, filename, gemstone_metadata(gem_type, slot, False))
            _write(redeemed_dir, filename, gemstone_metadata(gem_type, slot, True))

    counts = {
        "goblets": MAX_GOBLET_SUPPLY,
        "gemstones/unredeemed": len(GemType) * GEMS_PER_TYPE,
        "gemstones/redeemed": len(GemType) * GEMS_PER_TYPE,
    }
    logger.info(f"Wrote metadata documents to {output_dir}: {counts}")
    return counts
