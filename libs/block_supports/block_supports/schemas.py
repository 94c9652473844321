"""
Schémas Pydantic pour block_supports.

ParsedBlock  : bloc tel que sorti du parseur de contenu (blockName + attrs)
BlockType    : type de bloc enregistré + métadonnées `supports`
Payloads API : ElementsRenderRequest / ElementsRenderResponse
"""
from typing import Any, Dict, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ParsedBlock(BaseModel):
    """Bloc parsé. `blockName` accepté tel quel (alias) ou en snake_case."""
    model_config = ConfigDict(populate_by_name=True)

    block_name: Optional[str] = Field(default=None, alias="blockName")
    attrs: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


BlockLike = Union[ParsedBlock, Mapping[str, Any]]


def as_block_dict(block: BlockLike) -> dict:
    """Normalise un bloc (modèle ou mapping) en dict `{blockName, attrs, ...}`."""
    if isinstance(block, ParsedBlock):
        return block.to_dict()
    return dict(block)


class BlockType(BaseModel):
    """Type de bloc enregistré (ex. core/paragraph)."""
    name: str
    title: Optional[str] = None
    supports: Dict[str, Any] = Field(default_factory=dict)


class ElementsRenderRequest(BaseModel):
    block_content: str = ""
    block: ParsedBlock


class ElementsRenderResponse(BaseModel):
    block_content: str
    class_name: Optional[str] = None
    css: str = ""
