"""Unit tests for provider selection and container wiring."""

import pytest

from warden.util.di import (
    EmailProvider,
    ProdConfigProvider,
    ProdEmailProvider,
    get_provider,
)
from warden.util.di.container import create_container
from tests.di import MockEmailProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_is_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(EmailProvider, use_mock=False) is ProdEmailProvider
        assert get_provider(EmailProvider, use_mock=True) is MockEmailProvider


class TestContainers:
    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"smtp"})

    @pytest.mark.asyncio
    async def test_production_graph_builds(self):
        container = create_container()
        await container.close()
