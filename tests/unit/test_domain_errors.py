from __future__ import annotations

from recipes_api.app.domain.errors import (
    ConfigurationError,
    MalformedRecipeError,
    RecipeNotFoundError,
    RecipeStoreError,
    SeedFileError,
    StorageFaultError,
    StoreNotReadyError,
)


class TestRecipeStoreError:
    def test_base_exception(self) -> None:
        error = RecipeStoreError("Base error")
        assert str(error) == "Base error"
        assert isinstance(error, Exception)


class TestRecipeNotFoundError:
    def test_includes_recipe_id(self) -> None:
        error = RecipeNotFoundError("c0283p3d0cvuglq85log")
        assert "c0283p3d0cvuglq85log" in str(error)
        assert error.recipe_id == "c0283p3d0cvuglq85log"


class TestMalformedRecipeError:
    def test_default_message(self) -> None:
        assert str(MalformedRecipeError()) == "Malformed recipe"


class TestSeedFileError:
    def test_includes_path_and_reason(self) -> None:
        error = SeedFileError("recipes.json", "expected a JSON array")
        assert "recipes.json" in str(error)
        assert "expected a JSON array" in str(error)
        assert error.path == "recipes.json"
        assert error.reason == "expected a JSON array"


class TestStorageFaultError:
    def test_includes_operation_and_reason(self) -> None:
        error = StorageFaultError("insert_one", "Connection refused")
        assert "insert_one" in str(error)
        assert "Connection refused" in str(error)
        assert error.operation == "insert_one"
        assert error.reason == "Connection refused"


class TestStoreNotReadyError:
    def test_default_message(self) -> None:
        assert "not been loaded" in str(StoreNotReadyError())


class TestConfigurationError:
    def test_includes_all_errors(self) -> None:
        errors = ["SUPABASE_URL is required", "SUPABASE_SERVICE_ROLE_KEY is required"]
        error = ConfigurationError(errors)
        assert "SUPABASE_URL is required" in str(error)
        assert "SUPABASE_SERVICE_ROLE_KEY is required" in str(error)
        assert error.errors == errors


class TestExceptionHierarchy:
    def test_all_errors_inherit_from_recipe_store_error(self) -> None:
        assert issubclass(RecipeNotFoundError, RecipeStoreError)
        assert issubclass(MalformedRecipeError, RecipeStoreError)
        assert issubclass(SeedFileError, MalformedRecipeError)
        assert issubclass(StorageFaultError, RecipeStoreError)
        assert issubclass(StoreNotReadyError, RecipeStoreError)
        assert issubclass(ConfigurationError, RecipeStoreError)
