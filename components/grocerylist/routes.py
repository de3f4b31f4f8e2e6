from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from .contracts import GroceryList, Id, Item, Outcome
from .handlers import add_item, delete_item, get_items, update_item
from .store import GroceryStore

GROCERIES_PATH = "/v1/groceries"

OUTCOME_STATUS: Dict[str, int] = {"created": 201, "ok": 200}

router = APIRouter(prefix=GROCERIES_PATH, tags=["groceries"])
greeting_router = APIRouter(tags=["greeting"])


def get_store(request: Request) -> GroceryStore:
    # The app owns the single store; tests can override this dependency.
    return request.app.state.store


def _reply(outcome: Outcome) -> PlainTextResponse:
    return PlainTextResponse(outcome.message, status_code=OUTCOME_STATUS[outcome.kind])


@router.post("", response_class=PlainTextResponse, status_code=201)
def add_grocery_list_item(item: Item, store: GroceryStore = Depends(get_store)):
    return _reply(add_item(item, store))


@router.get("", response_model=GroceryList)
def get_grocery_list(store: GroceryStore = Depends(get_store)):
    return get_items(store)


@router.put("", response_class=PlainTextResponse, status_code=201)
def update_grocery_list_item(item: Item, store: GroceryStore = Depends(get_store)):
    return _reply(update_item(item, store))


@router.delete("", response_class=PlainTextResponse)
def delete_grocery_list_item(target: Id, store: GroceryStore = Depends(get_store)):
    return _reply(delete_item(target, store))


@greeting_router.get("/hello/{name}", response_class=PlainTextResponse)
def hello(name: str, request: Request):
    # Greet with the segment exactly as sent, without percent-decoding.
    raw_path = request.scope.get("raw_path")
    if raw_path:
        name = raw_path.split(b"?", 1)[0].decode("latin-1").rsplit("/", 1)[-1]
    return f"Hello, {name}!"
