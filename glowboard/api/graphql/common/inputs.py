from glowboard.api.graphql.types.scalars import Date
import strawberry


@strawberry.input
class DateRangeInput:
    start_date: Date
    end_date: Date


@strawberry.input
class CategoryAmountInput:
    category: str
    amount: float
