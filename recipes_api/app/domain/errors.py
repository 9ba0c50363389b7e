from __future__ import annotations


class RecipeStoreError(Exception):
    pass


class RecipeNotFoundError(RecipeStoreError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class MalformedRecipeError(RecipeStoreError):
    def __init__(self, message: str = "Malformed recipe"):
        super().__init__(message)


class SeedFileError(MalformedRecipeError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid seed file {path}: {reason}")
        self.path = path
        self.reason = reason


class StorageFaultError(RecipeStoreError):
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Storage fault during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class StoreNotReadyError(RecipeStoreError):
    def __init__(self, message: str = "Recipe store has not been loaded"):
        super().__init__(message)


class ConfigurationError(RecipeStoreError):
    def __init__(self, errors: list[str]):
        super().__init__(f"Configuration errors: {', '.join(errors)}")
        self.errors = errors
