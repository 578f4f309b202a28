import json

from feedfilter.services.body_filter import filter_body


def test_end_to_end_example():
    body = '{"data":{"items":[{"stat":{"view":100}},{"stat":{"view":9999}},{"title":"no-stat"}]}}'
    result = filter_body(body, 5000)
    assert result.reason == 'filtered'
    assert result.body == '{"data":{"items":[{"stat":{"view":9999}},{"title":"no-stat"}]}}'
    assert result.items_dropped == 1
    assert result.lists_matched == 1


def test_no_body():
    result = filter_body(None, 10)
    assert result.passthrough
    assert result.reason == 'no-body'


def test_bytes_are_decoded():
    result = filter_body(b'[{"view": 1}, {"view": 20}]', 10)
    assert json.loads(result.body) == [{"view": 20}]


def test_non_utf8_bytes_pass_through():
    result = filter_body(b'\x0a\x8b\xff\xfe', 10)
    assert result.passthrough
    assert result.reason == 'not-text'


def test_non_json_passes_through():
    for body in ('<html></html>', '\x08\x01binary', '', '   ', 'null', '"str"'):
        result = filter_body(body, 10)
        assert result.passthrough
        assert result.reason == 'not-json'


def test_malformed_json_passes_through():
    result = filter_body('{not valid json', 10)
    assert result.passthrough
    assert result.reason == 'parse-error'


def test_leading_whitespace_allowed():
    result = filter_body('  \n {"a": 1}', 10)
    assert result.body == '{"a":1}'


def test_non_ascii_kept_verbatim():
    result = filter_body('{"items":[{"title":"视频","view":"1.2万"}]}', 5)
    assert result.body == '{"items":[{"title":"视频","view":"1.2万"}]}'


def test_unexpected_errors_pass_through(monkeypatch):
    from feedfilter.services import body_filter

    def explode(self, node):
        raise RecursionError("too deep")

    monkeypatch.setattr(body_filter.DocumentWalker, "walk", explode)
    result = filter_body('{"a": 1}', 10)
    assert result.passthrough
    assert result.reason == 'error'


def deep_body(levels):
    nested = '{"a":' * levels + '[{"view":1},{"view":9}]' + '}' * levels
    return '{"items":[{"view":1},{"view":9}],"deep":' + nested + '}'


def test_overflowing_number_passes_through():
    # 1e400 parses to inf, which has no JSON spelling
    body = '{"a":1e400,"items":[{"view":1},{"view":9}]}'
    result = filter_body(body, 5)
    assert result.passthrough
    assert result.reason == 'error'


def test_non_json_constants_pass_through():
    for const in ('NaN', 'Infinity', '-Infinity'):
        result = filter_body('{"a":%s,"items":[{"view":1},{"view":9}]}' % const, 5)
        assert result.passthrough
        assert result.reason == 'parse-error'


def test_filtered_output_is_strict_json():
    result = filter_body('{"a":1.5e10,"items":[{"view":1},{"view":9}]}', 5)

    def strict(name):
        raise ValueError(name)

    assert json.loads(result.body, parse_constant=strict) == {"a": 1.5e10, "items": [{"view": 9}]}


def test_too_deep_document_is_not_half_filtered():
    result = filter_body(deep_body(600), 5)
    assert result.passthrough
    assert result.reason == 'error'


def test_moderately_deep_document_is_filtered():
    result = filter_body(deep_body(50), 5)
    doc = json.loads(result.body)
    assert doc["items"] == [{"view": 9}]
    node = doc["deep"]
    for _ in range(50):
        node = node["a"]
    assert node == [{"view": 9}]
    assert result.lists_matched == 2
