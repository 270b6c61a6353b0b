"""Tests for top_up_reviewed_preprints.merge module."""

from conftest import make_preprint
from top_up_reviewed_preprints.codecs import encode_preprints, read_cached_preprints
from top_up_reviewed_preprints.merge import combine, merge, tidy_up


class TestCombine:
    def test_sorted_by_status_date_descending(self) -> None:
        result = combine([make_preprint(1), make_preprint(5)], [make_preprint(3), make_preprint(9)])
        assert [p.id for p in result] == ["rp9", "rp5", "rp3", "rp1"]
        assert all(a.status_date >= b.status_date for a, b in zip(result, result[1:]))

    def test_cached_record_wins_on_shared_id(self) -> None:
        cached = [make_preprint(1, status_day=1, fingerprint="old")]
        delta = [make_preprint(1, status_day=30, fingerprint="new")]

        [result] = combine(cached, delta)

        assert result.hash == "old"
        assert result == cached[0]

    def test_every_unique_id_kept_once(self) -> None:
        cached = [make_preprint(n) for n in (1, 2, 3)]
        delta = [make_preprint(n) for n in (3, 4, 4, 5)]
        result = combine(cached, delta)
        assert sorted(p.id for p in result) == ["rp1", "rp2", "rp3", "rp4", "rp5"]

    def test_ties_keep_input_order(self) -> None:
        result = combine([make_preprint(1, status_day=2)], [make_preprint(2, status_day=2)])
        assert [p.id for p in result] == ["rp1", "rp2"]

    def test_merging_same_delta_twice_is_idempotent(self) -> None:
        cached = [make_preprint(n) for n in (2, 4)]
        delta = [make_preprint(n) for n in (1, 4, 6)]
        once = combine(cached, delta)
        assert combine(once, delta) == once

    def test_empty_inputs(self) -> None:
        assert combine([], []) == []


class TestMerge:
    def test_writes_merged_list(self, store, cache_dirs) -> None:
        cache_dirs.list_file.write_text(encode_preprints([make_preprint(1), make_preprint(2)]))
        cache_dirs.new_list_file.write_text(encode_preprints([make_preprint(2), make_preprint(3)]))

        merged = merge(store, cache_dirs)

        assert [p.id for p in merged] == ["rp3", "rp2", "rp1"]
        assert read_cached_preprints(store, cache_dirs.list_file) == merged

    def test_missing_delta_keeps_cache(self, store, cache_dirs) -> None:
        cache_dirs.list_file.write_text(encode_preprints([make_preprint(1)]))
        assert [p.id for p in merge(store, cache_dirs)] == ["rp1"]

    def test_missing_cache_uses_delta(self, store, cache_dirs) -> None:
        cache_dirs.new_list_file.write_text(encode_preprints([make_preprint(1), make_preprint(2)]))
        assert [p.id for p in merge(store, cache_dirs)] == ["rp2", "rp1"]

    def test_merge_leaves_delta_for_tidy_up(self, store, cache_dirs) -> None:
        cache_dirs.new_list_file.write_text(encode_preprints([make_preprint(1)]))
        merge(store, cache_dirs)
        assert cache_dirs.new_list_file.exists()

        tidy_up(store, cache_dirs)
        assert not cache_dirs.new_list_file.exists()

    def test_tidy_up_without_delta(self, store, cache_dirs) -> None:
        tidy_up(store, cache_dirs)
        assert not cache_dirs.new_list_file.exists()
