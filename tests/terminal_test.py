import numpy as np
import pandas as pd

import suite
from suite import raises
from lazyseq import P, from_range, empty, EmptyInputError, InvalidArgumentError
from fixtures import TrackedSource, people

test = suite.test
assert_that = suite.assert_that


# --- has_exactly_one ---

@test("has_exactly_one is true only for a single element")
def test_has_exactly_one():
    assert_that(P([42]).to.has_exactly_one(), "one element should be true")
    assert_that(not P([1, 2]).to.has_exactly_one(), "two elements should be false")
    assert_that(not empty().to.has_exactly_one(), "empty should be false")
    assert_that(not P(None).to.has_exactly_one(), "absent should be false")


@test("has_exactly_one never reads more than two elements")
def test_has_exactly_one_bounded():
    source = TrackedSource(range(1000))
    assert_that(not P(source).to.has_exactly_one(), "many elements should be false")
    assert_that(source.pulled == 2, f"should read two elements, read {source.pulled}")
    assert_that(source.all_released, "cursor should be released")


# --- has_at_least ---

@test("has_at_least zero holds for everything, including absent sources")
def test_has_at_least_zero():
    assert_that(P(None).to.has_at_least(0), "absent satisfies zero")
    assert_that(empty().to.has_at_least(0), "empty satisfies zero")
    assert_that(P([1]).to.has_at_least(0), "non-empty satisfies zero")


@test("has_at_least counts correctly around the boundary")
def test_has_at_least_boundary():
    data = P([1, 2, 3])
    assert_that(data.to.has_at_least(2), "3 >= 2")
    assert_that(data.to.has_at_least(3), "3 >= 3")
    assert_that(not data.to.has_at_least(4), "3 < 4")
    assert_that(not P(None).to.has_at_least(1), "absent has fewer than one")


@test("has_at_least stops as soon as the count is reached and releases the cursor")
def test_has_at_least_stops_early():
    source = TrackedSource(range(1000))
    assert_that(P(source).to.has_at_least(5), "should have at least 5")
    assert_that(source.pulled == 5, f"should stop at 5, pulled {source.pulled}")
    assert_that(source.all_released, "cursor should be released")


@test("has_at_least works on an infinite sequence")
def test_has_at_least_infinite():
    assert_that(P([1, 2]).util.to_circular().to.has_at_least(50), "circular sequence is unbounded")


# --- join_with / csv ---

@test("join_with uses ', ' and str by default")
def test_join_with_default():
    assert_that(P([1, 2, 3]).to.join_with() == "1, 2, 3", "default delimiter should be ', '")


@test("join_with applies the delimiter and projection")
def test_join_with_projection():
    result = P([1, 2, 3]).to.join_with(" | ", lambda x: f"<{x}>")
    assert_that(result == "<1> | <2> | <3>", f"got {result}")


@test("join_with on absent or empty input is the empty string")
def test_join_with_empty():
    assert_that(P(None).to.join_with("-") == "", "absent should join to ''")
    assert_that(empty().to.join_with("-") == "", "empty should join to ''")
    assert_that(P(['solo']).to.join_with("-") == "solo", "single element has no delimiter")


@test("csv joins with a bare comma")
def test_csv():
    assert_that(P(['a', 'b', 'c']).to.csv() == "a,b,c", "csv should use ','")
    assert_that(P([1.5, 2.0]).to.csv(lambda x: f"{x:.1f}") == "1.5,2.0", "csv should apply projection")


# --- materialization ---

@test("set and hash_set project elements")
def test_set_and_hash_set():
    records = people(20)
    cities = P(records).to.hash_set(lambda r: r['city'])
    assert_that(cities <= {'ny', 'la', 'chi'}, f"unexpected cities {cities}")
    assert_that(P([1, 1, 2]).to.set() == {1, 2}, "plain set should dedupe")
    with raises(InvalidArgumentError):
        P([1]).to.hash_set(None)


@test("dict builds a lookup from selectors")
def test_dict():
    records = people(5)
    by_id = P(records).to.dict(lambda r: r['id'], lambda r: r['name'])
    assert_that(list(by_id.keys()) == [0, 1, 2, 3, 4], "ids should be keys in order")
    assert_that(by_id[2] == records[2]['name'], "value selector should apply")


@test("array and pandas terminals convert the data")
def test_array_and_pandas():
    arr = from_range(0, 4).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be a numpy array")
    assert_that(arr.tolist() == [0, 1, 2, 3], "array values should match")

    series = P([1, 2, 3]).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.sum() == 6, "series should sum to 6")

    frame = P(people(4)).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a dataframe")
    assert_that(list(frame.columns) == ['id', 'name', 'age', 'city'], f"columns: {list(frame.columns)}")


@test("first raises EmptyInputError on an empty sequence")
def test_first():
    assert_that(P([4, 5]).to.first() == 4, "first should be 4")
    assert_that(P([4, 5]).to.first(lambda x: x > 4) == 5, "first match should be 5")
    with raises(EmptyInputError):
        empty().to.first()
    assert_that(empty().to.first_or_default(default=-1) == -1, "default should be returned")


@test("any and count")
def test_any_and_count():
    assert_that(P([1, 2, 3]).to.count(lambda x: x > 1) == 2, "two elements above one")
    assert_that(not P(None).to.any(), "absent has no elements")
    assert_that(P([1, 2, 3]).to.any(lambda x: x == 3), "3 is present")


@test("materializing terminals read the pipeline exactly once")
def test_terminals_read_once():
    source = TrackedSource([1, 2, 3])
    seen = []
    tapped = P(source).util.tap(seen.append)

    assert_that(tapped.to.list() == [1, 2, 3], "list keeps the elements")
    assert_that(source.opened == 1, f"one cursor per materialization, got {source.opened}")
    assert_that(seen == [1, 2, 3], f"tap fires once per element, got {seen}")

    tapped.to.array()
    tapped.to.pandas()
    tapped.to.df()
    assert_that(source.opened == 4, f"array, pandas and df read once each, got {source.opened}")
    assert_that(len(seen) == 12, f"tap fired {len(seen)} times over four materializations")


@test("a one-shot iterator survives materialization")
def test_one_shot_to_list():
    assert_that(P(iter([1, 2, 3])).to.list() == [1, 2, 3], "no element should be lost")
    assert_that(list(P(iter('ab'))) == ['a', 'b'], "plain list() reads the source once too")


if __name__ == "__main__":
    suite.run(title="lazyseq terminal operations test")
