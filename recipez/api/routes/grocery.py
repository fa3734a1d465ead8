from fastapi import APIRouter, Body, Depends, Query, Response
from typing import Optional

from recipez.infra.Grocery_Repository import GroceryRepository
from recipez.infra.pdf_utils import generate_pdf_for_grocery_list
from recipez.logic.grocery.export import format_grocery_text
from recipez.logic.grocery.ordering import display_order
from recipez.utilities.validators import GroceryIngestInput, GroceryItemUpdate, GroceryReorderInput

router = APIRouter(prefix="/api/grocery-list", tags=["grocery-list"])

_repository: Optional[GroceryRepository] = None


def get_grocery_repository() -> GroceryRepository:
    global _repository
    if _repository is None:
        _repository = GroceryRepository()
    return _repository


@router.get("")
def get_grocery_list(repo: GroceryRepository = Depends(get_grocery_repository)):
    """Return items in stored (manual) order."""
    return [i.to_dict() for i in repo.list_items()]


@router.get("/display")
def get_grocery_list_display(q: Optional[str] = Query(default=None, description="Filter by item name"),
                             repo: GroceryRepository = Depends(get_grocery_repository)):
    """Return items the way the list is rendered: unchecked first, checked last."""
    return [i.to_dict() for i in display_order(repo.list_items(), q)]


@router.get("/export")
def export_grocery_list_text(repo: GroceryRepository = Depends(get_grocery_repository)):
    return Response(content=format_grocery_text(repo.list_items()), media_type="text/plain")


@router.get("/export.pdf")
def export_grocery_list_pdf(repo: GroceryRepository = Depends(get_grocery_repository)):
    pdf_bytes = generate_pdf_for_grocery_list(repo.list_items())
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=grocery_list.pdf"},
    )


@router.post("")
def add_to_grocery_list(payload: GroceryIngestInput, repo: GroceryRepository = Depends(get_grocery_repository)):
    return [i.to_dict() for i in repo.ingest(payload.ingredient_list())]


# Fixed paths first so "reorder" / "checked" are never taken for an item id
@router.put("/reorder")
def reorder_grocery_list(payload: GroceryReorderInput, repo: GroceryRepository = Depends(get_grocery_repository)):
    return [i.to_dict() for i in repo.reorder(payload.item_ids)]


@router.delete("/checked")
def remove_checked_items(repo: GroceryRepository = Depends(get_grocery_repository)):
    removed = repo.remove_checked()
    return {"message": f"Removed {removed} checked item(s)", "removedCount": removed}


@router.put("/{item_id}/toggle")
def toggle_grocery_item(item_id: int, repo: GroceryRepository = Depends(get_grocery_repository)):
    return repo.set_checked(item_id).to_dict()


@router.put("/{item_id}")
def update_grocery_item(item_id: int,
                        payload: Optional[GroceryItemUpdate] = Body(default=None),
                        repo: GroceryRepository = Depends(get_grocery_repository)):
    checked = payload.checked if payload is not None else None
    return repo.set_checked(item_id, checked).to_dict()


@router.delete("/{item_id}")
def delete_grocery_item(item_id: int, repo: GroceryRepository = Depends(get_grocery_repository)):
    repo.remove_item(item_id)
    return {"message": "Grocery item deleted successfully"}


@router.delete("")
def clear_grocery_list(repo: GroceryRepository = Depends(get_grocery_repository)):
    repo.clear()
    return {"message": "Grocery list cleared successfully"}
