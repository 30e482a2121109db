import pytest

from gnomics.discrete_transformer import DiscreteTransformer


def _acts(bits):
    return [i for i, b in enumerate(bits) if b]


def _encode(num_v, num_s, value):
    dt = DiscreteTransformer(num_v, num_s, 2, 0)
    dt.set_value(value)
    dt.compute()
    return dt


def test_new():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    assert dt.num_v() == 10
    assert dt.num_s() == 1024
    assert dt.num_as() == 102


def test_invalid_num_v():
    with pytest.raises(ValueError, match="num_v must be > 0"):
        DiscreteTransformer(0, 1024, 2, 0)


def test_invalid_num_s():
    with pytest.raises(ValueError, match="num_s must be > 0"):
        DiscreteTransformer(4, 0, 2, 0)


def test_invalid_num_t():
    with pytest.raises(ValueError, match="num_t must be at least 2"):
        DiscreteTransformer(4, 1024, 1, 0)


def test_set_get_value():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    dt.set_value(0)
    assert dt.get_value() == 0
    dt.set_value(5)
    assert dt.get_value() == 5
    dt.set_value(9)
    assert dt.get_value() == 9


def test_value_out_of_range():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    with pytest.raises(ValueError, match="value must be < num_v"):
        dt.set_value(10)


def test_encode_num_active():
    dt = _encode(4, 1024, 2)
    assert dt.output.state.count() == 256


def test_encode_different_categories():
    dt1 = _encode(4, 1024, 0)
    dt2 = _encode(4, 1024, 1)
    assert (dt1.output.state & dt2.output.state).count() == 0


def test_encode_same_category():
    dt1 = _encode(4, 1024, 2)
    dt2 = _encode(4, 1024, 2)
    assert dt1.output.state == dt2.output.state


def test_encode_all_categories_distinct():
    num_v = 8
    transformers = [_encode(num_v, 1024, i) for i in range(num_v)]
    for i, a in enumerate(transformers):
        for b in transformers[i + 1 :]:
            assert (a.output.state & b.output.state).count() == 0


def test_window_positions():
    assert _acts(_encode(4, 1024, 0).output.state) == list(range(0, 256))
    assert _acts(_encode(4, 1024, 3).output.state) == list(range(768, 1024))


def test_single_category_fills_output():
    dt = _encode(1, 64, 0)
    assert dt.output.state.count() == 64


def test_encode_change_detection():
    dt = _encode(10, 1024, 5)
    acts1 = _acts(dt.output.state)
    dt.compute()
    acts2 = _acts(dt.output.state)
    assert acts1 == acts2


def test_feedforward_store():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    dt.set_value(5)
    dt.pull()
    dt.compute()
    dt.store()
    assert dt.output.state.count() == 102
    assert dt.output.get_bitarray(0).count() == 102
    assert dt.output.has_changed()


def test_store_unchanged_after_step():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    dt.set_value(5)
    dt.compute()
    dt.store()
    dt.step()
    dt.compute()
    dt.store()
    assert not dt.output.has_changed()


def test_clear():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    dt.set_value(5)
    dt.compute()
    dt.store()
    dt.clear()
    assert dt.output.state.count() == 0
    assert dt.get_value() == 0


def test_clear_then_same_value_reencodes():
    dt = _encode(10, 1024, 5)
    dt.clear()
    dt.set_value(5)
    dt.compute()
    assert dt.output.state.count() == 102


def test_memory_usage():
    dt = DiscreteTransformer(10, 1024, 2, 0)
    assert dt.memory_usage() > 2 * (1024 // 8)


def test_binary_choice():
    dt = DiscreteTransformer(2, 1024, 2, 0)
    dt.set_value(0)
    dt.compute()
    acts0 = _acts(dt.output.state)
    assert dt.output.state.count() == 512
    dt.set_value(1)
    dt.compute()
    acts1 = _acts(dt.output.state)
    assert dt.output.state.count() == 512
    assert not set(acts0) & set(acts1)