import pytest

from shell_charset.services.charset import Charset, NoMatch, parse_charset


LABEL_CASES = [
    ('ASCII', Charset.ASCII),
    ('Shift_JIS', Charset.SHIFT_JIS),
    ('ISO-2022-JP', Charset.ISO_2022_JP),
    ('EUC-JP', Charset.EUC_JP),
    ('UTF-8', Charset.UTF_8),
]


@pytest.mark.parametrize('label,expected', LABEL_CASES)
@pytest.mark.parametrize('suffix', ['', '\r\n', '\n', ' trailing text', 'UTF-8'])
def test_parse_known_labels(label, expected, suffix):
    remain, charset = parse_charset(label + suffix)
    assert remain == suffix
    assert charset is expected


def test_parse_shift_jis_header():
    remain, charset = parse_charset('Shift_JIS\r\n...')
    assert charset is Charset.SHIFT_JIS
    assert remain == '\r\n...'


@pytest.mark.parametrize('case', ['x76', 'ascii', 'UTF8', 'shift_jis', ' UTF-8', '\ufeffUTF-8', ''])
def test_parse_rejects_unknown(case):
    with pytest.raises(NoMatch) as exc_info:
        parse_charset(case)
    assert exc_info.value.text == case
    assert exc_info.value.position == 0


def test_no_match_lists_labels_in_order():
    with pytest.raises(NoMatch) as exc_info:
        parse_charset('x76')
    assert exc_info.value.labels == ['ASCII', 'Shift_JIS', 'ISO-2022-JP', 'EUC-JP', 'UTF-8']


def test_no_match_is_value_error():
    with pytest.raises(ValueError):
        parse_charset('Default')


def test_parse_is_repeatable():
    case = 'EUC-JP\r\ncharset,EUC-JP'
    assert parse_charset(case) == parse_charset(case)


def test_parse_requires_str():
    with pytest.raises(TypeError):
        parse_charset(b'UTF-8')
