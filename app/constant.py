"""Editable static menu configuration."""

from __future__ import annotations

from app.models import ItemType

ENTREE = ItemType.ENTREE.value
SIDE = ItemType.SIDE.value
ACCOMPANIMENT = ItemType.ACCOMPANIMENT.value

# Prices are strings so they convert to Decimal without float drift.
MENU_CATALOG: dict[str, dict[str, str]] = {
    "cauliflower": {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": "7.00",
        "type": ENTREE,
    },
    "chili": {
        "name": "Three Bean Chili",
        "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "price": "4.00",
        "type": ENTREE,
    },
    "pasta": {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
        "price": "5.50",
        "type": ENTREE,
    },
    "skillet": {
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        "price": "5.50",
        "type": ENTREE,
    },
    "salad": {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": "2.50",
        "type": SIDE,
    },
    "soup": {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": "3.00",
        "type": SIDE,
    },
    "potatoes": {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "price": "2.00",
        "type": SIDE,
    },
    "rice": {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": "1.50",
        "type": SIDE,
    },
    "bread": {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": "0.50",
        "type": ACCOMPANIMENT,
    },
    "berries": {
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "price": "1.00",
        "type": ACCOMPANIMENT,
    },
    "pickles": {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": "0.50",
        "type": ACCOMPANIMENT,
    },
}
