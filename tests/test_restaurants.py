import pytest

from yegfinder.geo import LAT_NORTH, LAT_SOUTH, LON_EAST, LON_WEST, lat_to_y, lon_to_x
from yegfinder.restaurants import (
    BLOCK_SIZE,
    RECORD_SIZE,
    Restaurant,
    RestaurantStore,
    RestDist,
    distances,
    star_rating,
)


def _sample(i):
    return Restaurant(
        lat=LAT_NORTH - i * 10,
        lon=LON_WEST + i * 20,
        rating=i % 11,
        name=f"Place {i}",
    )


@pytest.fixture
def store_path(tmp_path):
    path = tmp_path / "rest.bin"
    path.write_bytes(b"".join(_sample(i).to_bytes() for i in range(20)))
    return path


def test_record_round_trip():
    rest = Restaurant(LAT_SOUTH, LON_EAST, 7, "Noodle House")
    data = rest.to_bytes()
    assert len(data) == RECORD_SIZE
    assert Restaurant.from_bytes(data) == rest


def test_record_layout():
    data = Restaurant(LAT_NORTH, LON_WEST, 9, "A").to_bytes()
    assert data[:4] == LAT_NORTH.to_bytes(4, "little", signed=True)
    assert data[4:8] == LON_WEST.to_bytes(4, "little", signed=True)
    assert data[8] == 9
    assert data[9:11] == b"A\0"


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Restaurant.from_bytes(b"\0" * (RECORD_SIZE - 1))


def test_name_too_long():
    with pytest.raises(ValueError):
        Restaurant(0, 0, 1, "x" * 56).to_bytes()


def test_star_rating_bounds():
    assert star_rating(0) == 1
    assert star_rating(10) == 5
    stars = [star_rating(r) for r in range(11)]
    assert stars == sorted(stars)
    assert set(stars) == {1, 2, 3, 4, 5}


def test_store_reads_all(store_path):
    with RestaurantStore(store_path) as store:
        assert len(store) == 20
        assert [store.get(i) for i in range(20)] == [_sample(i) for i in range(20)]


def test_store_cached_and_random_access(store_path):
    with RestaurantStore(store_path) as store:
        assert store.get(17) == _sample(17)
        assert store.get(3) == _sample(3)
        assert store.get(18) == _sample(18)
        assert list(store) == [_sample(i) for i in range(20)]


def test_store_start_block(tmp_path):
    path = tmp_path / "rest.bin"
    path.write_bytes(b"\xff" * BLOCK_SIZE * 2 + _sample(5).to_bytes())
    with RestaurantStore(path, start_block=2) as store:
        assert len(store) == 1
        assert store.get(0) == _sample(5)


def test_store_index_error(store_path):
    with RestaurantStore(store_path) as store:
        with pytest.raises(IndexError):
            store.get(20)
        with pytest.raises(IndexError):
            store.get(-1)


def test_distances_zero_at_restaurant(store_path):
    target = _sample(4)
    with RestaurantStore(store_path) as store:
        result = distances(store, lon_to_x(target.lon), lat_to_y(target.lat), 1)
    by_index = {rd.index: rd.dist for rd in result}
    assert by_index[4] == 0
    assert len(result) == 20


def test_distances_filters_rating(store_path):
    with RestaurantStore(store_path) as store:
        result = distances(store, 0, 0, 4)
        expected = [i for i in range(20) if star_rating(store.get(i).rating) >= 4]
    assert [rd.index for rd in result] == expected
    assert all(isinstance(rd, RestDist) and rd.dist >= 0 for rd in result)