"""Domain models for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

DEFAULT_FOOD_ICON = "🍽️"


@dataclass(frozen=True)
class Food:
    """Reference food with optional calorie density."""

    id: UUID
    name: str
    icon: str
    calories_per_100g: int | None


@dataclass(frozen=True)
class FoodSeed:
    """Catalog entry used to seed the default foods."""

    name: str
    icon: str
    calories_per_100g: int | None


DEFAULT_FOODS: tuple[FoodSeed, ...] = (
    FoodSeed("French Bread", "🥖", 300),
    FoodSeed("White Rice", "🍚", 130),
    FoodSeed("Black Beans", "🫘", 77),
    FoodSeed("Grilled Chicken", "🍗", 165),
    FoodSeed("Beef", "🥩", 250),
    FoodSeed("Boiled Egg", "🥚", 155),
    FoodSeed("Banana", "🍌", 89),
    FoodSeed("Apple", "🍎", 52),
    FoodSeed("Orange", "🍊", 47),
    FoodSeed("Whole Milk", "🥛", 61),
    FoodSeed("Minas Cheese", "🧀", 264),
    FoodSeed("Plain Yogurt", "🥛", 61),
    FoodSeed("French Fries", "🍟", 312),
    FoodSeed("Sweet Potato", "🍠", 86),
    FoodSeed("Pasta", "🍝", 131),
    FoodSeed("Pizza", "🍕", 266),
    FoodSeed("Hamburger", "🍔", 295),
    FoodSeed("Sandwich", "🥪", 226),
    FoodSeed("Green Salad", "🥗", 15),
    FoodSeed("Tomato", "🍅", 18),
    FoodSeed("Carrot", "🥕", 41),
    FoodSeed("Broccoli", "🥦", 34),
    FoodSeed("Coffee", "☕", 2),
    FoodSeed("Orange Juice", "🧃", 45),
    FoodSeed("Soda", "🥤", 42),
    FoodSeed("Diet Soda", "🥤", 0),
    FoodSeed("Water", "💧", 0),
    FoodSeed("Chocolate", "🍫", 546),
    FoodSeed("Ice Cream", "🍦", 207),
    FoodSeed("Cake", "🍰", 257),
    FoodSeed("Cookie", "🍪", 502),
    FoodSeed("Grilled Fish", "🐟", 206),
    FoodSeed("Shrimp", "🦐", 99),
    FoodSeed("Salmon", "🍣", 208),
    FoodSeed("Tuna", "🐟", 144),
    FoodSeed("Avocado", "🥑", 160),
    FoodSeed("Peanuts", "🥜", 567),
    FoodSeed("Cashews", "🌰", 656),
    FoodSeed("Tapioca", "🫓", 358),
    FoodSeed("Acai", "🫐", 70),
    FoodSeed("Coxinha", "🥟", 250),
    FoodSeed("Pastel", "🥟", 312),
    FoodSeed("Cheese Bread", "🧀", 335),
    FoodSeed("Brigadeiro", "🍬", 400),
    FoodSeed("Feijoada", "🍲", 150),
)
