"""
Test suite for GenerationService.

System role: Verification of generation registration and lookup
"""

import pytest

from tunesmith.application.services.generation_service import GenerationService
from tunesmith.core.exceptions import ValidationError


class TestGenerationService:
    """Test suite for GenerationService."""

    @pytest.mark.asyncio
    async def test_register_then_get_current(self, test_async_db) -> None:
        # Arrange
        service = GenerationService(test_async_db)

        # Act
        created = await service.register(" job1 ", prompt="lofi beats")
        current = await service.get_current("job1")

        # Assert
        assert current.id == created.id
        assert current.prompt == "lofi beats"

    @pytest.mark.asyncio
    async def test_register_requires_task_id(self, test_async_db) -> None:
        with pytest.raises(ValidationError):
            await GenerationService(test_async_db).register("  ")

    @pytest.mark.asyncio
    async def test_get_current_unknown_raises_value_error(self, test_async_db) -> None:
        with pytest.raises(ValueError, match="does not exist"):
            await GenerationService(test_async_db).get_current("missing")
