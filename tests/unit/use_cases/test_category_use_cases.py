import pytest

from src.app.use_cases.categories import (
    CreateCategoryCommand,
    CreateCategoryUseCase,
    ListCategoriesUseCase,
)
from src.domain.entities import Category


@pytest.mark.asyncio
async def test_create_category(mock_uow):
    result = await CreateCategoryUseCase(mock_uow).execute(
        CreateCategoryCommand(name="Security", description="Infosec risks")
    )

    assert result.is_ok()
    assert result.value.name == "Security"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_duplicate_category(mock_uow):
    mock_uow.categories.get_by_name.return_value = Category(name="Security")

    result = await CreateCategoryUseCase(mock_uow).execute(CreateCategoryCommand(name="Security"))

    assert result.is_err()
    assert result.error.code == "CATEGORY_ALREADY_EXISTS"
    mock_uow.categories.create.assert_not_called()


@pytest.mark.asyncio
async def test_list_categories(mock_uow):
    mock_uow.categories.list_all.return_value = [Category(name="Finance"), Category(name="Security")]

    result = await ListCategoriesUseCase(mock_uow).execute()

    assert [c.name for c in result.value] == ["Finance", "Security"]
