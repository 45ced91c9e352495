"""Concurrency tests: shared rule stores, interpolators, and catalogs.

Resolution state is immutable after construction, so concurrent readers
must always observe complete results. Catalog writes publish a new
snapshot; readers see either the old or the new entry, never a mix.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from lingoengine import LocalizationCatalog
from lingoengine.diagnostics import CollectingReporter
from lingoengine.runtime import Pluralized, default_rule_store, resolve

RU_FILES = Pluralized(
    {"one": "{n} файл", "few": "{n} файла", "many": "{n} файлов", "other": "{n} файла"}
)


def _expected_ru(n: int) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return f"{n} файл"
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return f"{n} файла"
    return f"{n} файлов"


class TestConcurrentResolution:
    """Many threads resolving through shared state."""

    def test_shared_default_store(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda n: resolve(RU_FILES, "ru", {"n": n}), range(500)))

        assert results == [_expected_ru(n) for n in range(500)]

    def test_default_store_created_once(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            stores = list(pool.map(lambda _: default_rule_store(), range(50)))

        assert all(store is stores[0] for store in stores)

    def test_shared_reporter(self) -> None:
        reporter = CollectingReporter()
        localization = Pluralized({"other": "x"})

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(
                pool.map(
                    lambda _: resolve(localization, "en", {"n": 1}, reporter=reporter),
                    range(300),
                )
            )

        assert len(reporter) == 300


class TestConcurrentCatalog:
    """Readers racing a writer."""

    def test_readers_see_complete_entries(self) -> None:
        catalog = LocalizationCatalog("en", reporter=CollectingReporter())
        catalog.add_localizations("en", {"greeting": "Hello {name}"})

        def write(i: int) -> None:
            catalog.add_localizations("en", {f"key{i}": f"value {i}"})

        def read(_: int) -> str:
            return catalog.localize("greeting", "en", {"name": "Ann"})

        with ThreadPoolExecutor(max_workers=8) as pool:
            writes = [pool.submit(write, i) for i in range(100)]
            reads = [pool.submit(read, i) for i in range(400)]
            for future in writes:
                future.result()
            assert {future.result() for future in reads} == {"Hello Ann"}

        assert catalog.keys("en") == {"greeting", *(f"key{i}" for i in range(100))}
