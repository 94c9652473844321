"""
Router FastAPI : endpoints block_supports.

POST /block-supports/elements/render              → HTML + classe + CSS des éléments
GET  /block-supports/block-types                  → blocs enregistrés + supports
GET  /block-supports/block-types/{namespace}/{slug} → un bloc (404 si inconnu)
"""
from fastapi import APIRouter, HTTPException

from . import config
from .elements import get_elements_class_name, render_elements_support_styles
from .registry import get_default_registry
from .schemas import BlockType, ElementsRenderRequest, ElementsRenderResponse
from .style_engine import StyleStore
from .tag_processor import TagProcessor

router = APIRouter(prefix="/block-supports", tags=["block_supports"])


@router.post("/elements/render", response_model=ElementsRenderResponse,
             summary="Injecte la classe wp-elements-* et retourne le CSS associé")
def render_elements(payload: ElementsRenderRequest) -> ElementsRenderResponse:
    """Pré-rendu (CSS) puis injection de la classe générée sur la balise racine."""
    store = StyleStore(config.STYLE_CONTEXT)
    render_elements_support_styles(payload.block, store=store)

    # une règle par chemin couleur présent : pas de règle ⇔ pas de classe
    class_name = get_elements_class_name(payload.block) if store.get_rules() else None

    # classe injectée telle quelle : un wp-elements-* déjà présent dans
    # attrs.className ne doit pas la remplacer
    html = payload.block_content
    if class_name and html:
        tags = TagProcessor(html)
        if tags.next_tag():
            tags.add_class(class_name)
        html = tags.get_updated_html()

    return ElementsRenderResponse(
        block_content=html,
        class_name=class_name,
        css=store.get_stylesheet(),
    )


@router.get("/block-types", summary="Liste les types de blocs enregistrés")
def list_block_types() -> dict:
    return {"block_types": [bt.model_dump() for bt in get_default_registry().get_all_registered()]}


@router.get("/block-types/{namespace}/{slug}", response_model=BlockType,
            summary="Retourne un type de bloc")
def get_block_type(namespace: str, slug: str) -> BlockType:
    block_type = get_default_registry().get_registered(f"{namespace}/{slug}")
    if block_type is None:
        raise HTTPException(404, f"Bloc '{namespace}/{slug}' non enregistré")
    return block_type
