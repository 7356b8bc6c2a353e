import suite
from dgen import from_schema
from rollercoaster import (
    C, Coaster, coaster, from_iterable, from_range, repeat, empty, generate, Memory, GroupBy,
    Concat, group_by, unique
)

test = suite.test
assert_that = suite.assert_that

person_schema = {
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr']}
}


# factories

@test("factories build coasters")
def test_factories():
    assert_that(from_iterable([1, 2]).to.list() == [1, 2], "from_iterable should wrap a list")
    assert_that(from_range(3, 4).to.list() == [3, 4, 5, 6], "from_range should count from start")
    assert_that(repeat("x", 3).to.list() == ["x", "x", "x"], "repeat should repeat")
    assert_that(empty().to.list() == [], "empty should be empty")
    assert_that(coaster is from_iterable and C is from_iterable, "aliases should point to from_iterable")


@test("generate calls the function once per pulled item")
def test_generate_lazy():
    calls = []

    def make():
        calls.append(1)
        return len(calls)

    items = generate(make, 5)
    assert_that(calls == [], "nothing should run before pulling")
    assert_that(items.take(2).to.list() == [1, 2], "two values should be produced")
    assert_that(len(calls) == 2, "only two calls should have happened")


@test("coasters are single-pass iterators")
def test_single_pass():
    items = C([1, 2, 3])
    assert_that(iter(items) is items, "a coaster should be its own iterator")
    assert_that(items.to.list() == [1, 2, 3], "first pass sees everything")
    assert_that(items.to.list() == [], "second pass sees nothing")


@test("every combinator is a coaster and chains further")
def test_combinators_chain():
    m = C([1]).memory()
    g = C([1]).group_by(lambda x: x)
    assert_that(isinstance(m, Memory) and isinstance(m, Coaster), "memory should be a Coaster")
    assert_that(isinstance(g, GroupBy) and isinstance(g, Coaster), "group_by should be a Coaster")

    result = (C("aabbbc")
              .group_by(lambda ch: ch)
              .select(lambda grp: (grp.key, len(grp)))
              .where(lambda pair: pair[1] > 1)
              .to.list())
    assert_that(result == [("a", 2), ("b", 3)], "groups should flow into select and where")


@test("group_by after memory reads remembered items first")
def test_memory_then_group_by():
    items = C([2, 2, 3]).memory()
    items.remember(2)
    groups = items.group_by(lambda x: x).to.list()
    assert_that([g.items for g in groups] == [[2, 2, 2], [3]], "remembered 2 should join the first run")


@test("unique then group_by gives runs of distinct values")
def test_unique_then_group_by():
    groups = C([1, 1, 3, 2, 2, 4]).unique().group_by(lambda x: x % 2).to.list()
    assert_that([g.items for g in groups] == [[1, 3], [2, 4]], "unique output should be grouped by parity")


# lazy adapters

@test("where and select are lazy")
def test_where_select():
    pulled = []

    def source():
        for x in range(1, 11):
            pulled.append(x)
            yield x

    evens = C(source()).where(lambda x: x % 2 == 0).select(lambda x: x * x)
    assert_that(next(evens) == 4, "first even squared should be 4")
    assert_that(pulled == [1, 2], "only two items should have been pulled")
    assert_that(evens.to.list() == [16, 36, 64, 100], "the rest should follow")


@test("take and skip slice the sequence")
def test_take_skip():
    assert_that(from_range(0, 10).take(3).to.list() == [0, 1, 2], "take should keep the first three")
    assert_that(from_range(0, 5).skip(3).to.list() == [3, 4], "skip should drop the first three")
    assert_that(from_range(0, 2).take(5).to.list() == [0, 1], "take beyond the end keeps everything")
    assert_that(from_range(0, 2).skip(5).to.list() == [], "skip beyond the end leaves nothing")
    suite.assert_raises(ValueError, lambda: C([1]).take(-1))
    suite.assert_raises(ValueError, lambda: C([1]).skip(-1))


@test("take_while and skip_while follow the predicate")
def test_take_skip_while():
    assert_that(C([1, 2, 5, 1]).take_while(lambda x: x < 3).to.list() == [1, 2], "take_while stops at 5")
    assert_that(C([1, 2, 5, 1]).skip_while(lambda x: x < 3).to.list() == [5, 1], "skip_while starts at 5")


@test("take_while through memory keeps the item that ended it")
def test_take_while_with_memory():
    items = C([1, 2, 5, 6]).memory()
    head = []
    for x in items:
        if x >= 3:
            items.remember(x)
            break
        head.append(x)
    assert_that(head == [1, 2] and items.to.list() == [5, 6], "5 should survive the scan")


@test("chains over generated people stay consistent")
def test_generated_chain():
    people = from_schema(person_schema, seed=42).take(40).to.list()
    by_department = (C(people)
                     .where(lambda p: p['age'] > 30)
                     .unique_by(lambda p: p['department'])
                     .to.list())
    expected_order = [p['department'] for p in people if p['age'] > 30]
    first_seen = list(dict.fromkeys(expected_order))
    assert_that([p['department'] for p in by_department] == first_seen,
                "departments should appear in order of first senior member")


@test("non-iterable sources raise TypeError at construction")
def test_non_iterable_source():
    suite.assert_raises(TypeError, lambda: C(5))
    suite.assert_raises(TypeError, lambda: C([1]).append(5))
    suite.assert_raises(TypeError, lambda: Concat([1], 5))
    suite.assert_raises(TypeError, lambda: Concat(None, [1]))
    suite.assert_raises(TypeError, lambda: group_by(3, lambda x: x))
    suite.assert_raises(TypeError, lambda: unique(object()))


if __name__ == "__main__":
    suite.run(title="rollercoaster core test")
