from tonekit.pkgerror.stack import Frame, callers, format_stack, funcname


def _here():
    return callers(0)


def _caller_of_helper():
    return callers(1)


def test_callers_first_frame_is_caller():
    frames = _here()
    assert frames[0].name.endswith("_here")
    assert frames[0].file == __file__
    assert frames[1].name.endswith("test_callers_first_frame_is_caller")


def test_callers_skip_moves_outward():
    frames = _caller_of_helper()
    assert frames[0].name.endswith("test_callers_skip_moves_outward")


def test_callers_depth_limited():
    def recurse(n):
        if n == 0:
            return callers(0)
        return recurse(n - 1)

    frames = recurse(60)
    assert len(frames) == 32
    assert all(f.name.endswith("recurse") for f in frames)


def test_callers_skip_beyond_stack_is_empty():
    assert callers(100000) == []


def test_frame_line_is_positive_and_short_uses_basename():
    frame = _here()[0]
    assert frame.line > 0
    assert frame.short() == f"test_stack.py:{frame.line}"
    assert str(frame) == frame.short()


def test_marshal_text_unknown():
    assert Frame().marshal_text() == "unknown"


def test_marshal_text_known():
    frame = Frame("pkg.fn", "/src/pkg/file.py", 7)
    assert frame.marshal_text() == "pkg.fn /src/pkg/file.py:7"


def test_detailed_layout():
    frame = Frame("pkg.fn", "/src/pkg/file.py", 7)
    name, location = frame.detailed().split("\n\t")
    assert name == "pkg.fn"
    assert location == "/src/pkg/file.py:7"


def test_format_stack_prefixes_each_frame():
    frames = [Frame("a.f", "/x/a.py", 1), Frame("b.g", "/x/b.py", 2)]
    text = format_stack(frames)
    assert text == "\n" + frames[0].detailed() + "\n" + frames[1].detailed()
    assert format_stack([]) == ""


def test_funcname_strips_prefixes():
    assert funcname("example.com/mod/pkg.Func") == "Func"
    assert funcname("tonekit/pkgerror.stack.callers") == "stack.callers"
    assert funcname("plain") == "plain"