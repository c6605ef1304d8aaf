"""FastAPI app exposing hand classification endpoints.

You can mount this in a server process or run it with ``hand-ranking serve``.
Handlers are stateless; every request carries its own cards.
"""

from __future__ import annotations

from fastapi import FastAPI, HTTPException
from loguru import logger
from pydantic import BaseModel
from typing import List

from hand_ranking import Card, Category, Hand, construct_hand, determine_winner, rank_hands


app = FastAPI(title="Poker Hand Ranking API", version="0.1.0")


class HandIn(BaseModel):
    cards: List[str]


class HandsIn(BaseModel):
    hands: List[List[str]]


class CategoryOut(BaseModel):
    name: str
    rank: int
    label: str


class ClassifiedHandOut(BaseModel):
    cards: List[str]
    category: str
    rank: int
    label: str


class RankedHandOut(ClassifiedHandOut):
    index: int


def _build_hand(cards: List[str]) -> Hand:
    return construct_hand(Card.from_string(card) for card in cards)


def _describe(hand: Hand) -> dict:
    category = hand.category
    return {
        "cards": [str(card) for card in hand.cards],
        "category": category.name,
        "rank": int(category),
        "label": category.label,
    }


@app.get("/categories", response_model=List[CategoryOut], summary="List hand categories")
def api_categories():
    return [
        {"name": category.name, "rank": int(category), "label": category.label}
        for category in Category
    ]


@app.post("/classify", response_model=ClassifiedHandOut, summary="Classify a hand")
def api_classify(payload: HandIn):
    try:
        hand = _build_hand(payload.cards)
    except ValueError as e:
        logger.info("Rejected hand {}: {}", payload.cards, e)
        raise HTTPException(400, str(e))
    return _describe(hand)


@app.post("/winner", response_model=RankedHandOut, summary="Pick the winning hand")
def api_winner(payload: HandsIn):
    try:
        hands = [_build_hand(cards) for cards in payload.hands]
        winner = determine_winner(hands)
    except ValueError as e:
        logger.info("Rejected winner request: {}", e)
        raise HTTPException(400, str(e))
    index = next(i for i, hand in enumerate(hands) if hand is winner)
    return {"index": index, **_describe(winner)}


@app.post("/rank", response_model=List[RankedHandOut], summary="Order hands strongest first")
def api_rank(payload: HandsIn):
    try:
        hands = [_build_hand(cards) for cards in payload.hands]
    except ValueError as e:
        logger.info("Rejected rank request: {}", e)
        raise HTTPException(400, str(e))
    positions = {id(hand): index for index, hand in enumerate(hands)}
    return [{"index": positions[id(hand)], **_describe(hand)} for hand in rank_hands(hands)]
