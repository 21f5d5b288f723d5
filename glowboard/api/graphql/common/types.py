import strawberry


@strawberry.type
class CategoryAmount:
    category: str
    amount: float
