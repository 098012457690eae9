class BookingValidationError(Exception):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        self.message = "; ".join(self.errors)
        super().__init__(self.message)


class PricingError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
