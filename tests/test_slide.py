from argslide.slide import Slide, slide, slide_indexed


def test_slide_empty():
    assert list(slide([])) == []


def test_slide_one():
    assert list(slide([1])) == [(1, None)]


def test_slide_two():
    assert list(slide([1, 2])) == [(1, (2,)), (2, None)]


def test_slide_ten():
    values = list(range(1, 11))
    windows = list(slide(values))
    assert len(windows) == 10
    for index, (token, rest) in enumerate(windows[:-1]):
        assert token == values[index]
        assert rest == tuple(values[index + 1 :])
    assert windows[-1] == (10, None)


def test_slide_is_restartable():
    window = slide(["./go", "-f", "1", "2"])
    assert list(window) == list(window)
    assert len(window) == 4


def test_slide_copies_input():
    tokens = ["a", "b"]
    window = slide(tokens)
    tokens.append("c")
    assert list(window) == [("a", ("b",)), ("b", None)]


def test_slide_indexed_tracks_duplicates():
    triples = list(slide_indexed(["x", "x", "x"]))
    assert [index for index, _, _ in triples] == [0, 1, 2]
    assert triples[1] == (1, "x", ("x",))


def test_slide_repr():
    assert repr(Slide(["a"])) == "Slide(['a'])"
