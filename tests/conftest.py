"""공용 픽스처: 기본 템플릿을 임시 디렉토리에 생성해 사용한다."""

import pytest

import preview
from locker.assets import AssetStore
from locker.templates import save_default_templates
from renderer.layers import LockerCompositor


@pytest.fixture(scope="session")
def asset_dir(tmp_path_factory):
    directory = tmp_path_factory.mktemp("assets")
    save_default_templates(directory)
    return directory


@pytest.fixture(scope="session")
def assets(asset_dir) -> AssetStore:
    return AssetStore.from_directory(asset_dir)


@pytest.fixture
def compositor(assets) -> LockerCompositor:
    return LockerCompositor(assets)


@pytest.fixture
def engine(asset_dir) -> LockerCompositor:
    return preview.init_engine(asset_dir=asset_dir)
