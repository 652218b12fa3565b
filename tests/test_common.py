import pytest

from common import safe_read, safe_stat


@pytest.mark.asyncio
async def test_safe_stat_existing_file(tmp_path):
    path = tmp_path / 'a.pid'
    path.write_text('12')
    stat = await safe_stat(str(path))
    assert stat is not None
    assert stat.st_size == 2


@pytest.mark.asyncio
async def test_safe_stat_missing_file(tmp_path):
    assert await safe_stat(str(tmp_path / 'missing.pid')) is None


@pytest.mark.asyncio
async def test_safe_stat_bad_path():
    assert await safe_stat('bad\0path') is None


@pytest.mark.asyncio
async def test_safe_read_text(tmp_path):
    path = tmp_path / 'a.pid'
    path.write_text(' 77\n', encoding='utf-8')
    assert await safe_read(str(path)) == ' 77\n'


@pytest.mark.asyncio
async def test_safe_read_directory(tmp_path):
    assert await safe_read(str(tmp_path)) is None


@pytest.mark.asyncio
async def test_safe_read_undecodable(tmp_path):
    path = tmp_path / 'a.pid'
    path.write_bytes(b'\xff\xff')
    assert await safe_read(str(path)) is None
