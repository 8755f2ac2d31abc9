"""
Unit tests for parameter collection, normalization and base strings.

Golden values come from RFC 5849 section 3.4.1.
"""
from oauth1_header.auth import (
    collect_parameters,
    normalize_parameters,
    build_base_string,
    build_signing_key,
    compute_signature,
    percent_decode,
)
from oauth1_header.models import RequestDescriptor


RFC_URL = 'http://example.com/request?b5=%3D%253D&a3=a&c%40=&a2=r%20b'

RFC_OAUTH_PARAMS = {
    'oauth_consumer_key': '9djdj82h48djs9d2',
    'oauth_token': 'kkk9d7dh3k39sjv7',
    'oauth_signature_method': 'HMAC-SHA1',
    'oauth_timestamp': '137131201',
    'oauth_nonce': '7d8f3e4a',
}

# Form body "c2&a3=2+q"
RFC_BODY_PARAMS = [('c2', ''), ('a3', '2 q')]

RFC_NORMALIZED = (
    'a2=r%20b&a3=2%20q&a3=a&b5=%3D%253D&c%40=&c2=&oauth_consumer_key=9dj'
    'dj82h48djs9d2&oauth_nonce=7d8f3e4a&oauth_signature_method=HMAC-SHA1'
    '&oauth_timestamp=137131201&oauth_token=kkk9d7dh3k39sjv7'
)

RFC_BASE_STRING = (
    'POST&http%3A%2F%2Fexample.com%2Frequest&a2%3Dr%2520b%26a3%3D2%2520q'
    '%26a3%3Da%26b5%3D%253D%25253D%26c%2540%3D%26c2%3D%26oauth_consumer_'
    'key%3D9djdj82h48djs9d2%26oauth_nonce%3D7d8f3e4a%26oauth_signature_m'
    'ethod%3DHMAC-SHA1%26oauth_timestamp%3D137131201%26oauth_token%3Dkkk'
    '9d7dh3k39sjv7'
)


class TestCollectParameters:
    """Test gathering of signed parameters."""

    def test_combines_all_sources(self):
        """Test that extras, query and OAuth parameters are all collected."""
        request = RequestDescriptor('POST', RFC_URL)
        params = collect_parameters(request, RFC_OAUTH_PARAMS, RFC_BODY_PARAMS)

        assert sorted(params) == sorted([
            ('b5', '=%3D'),
            ('a3', 'a'),
            ('c@', ''),
            ('a2', 'r b'),
            ('oauth_consumer_key', '9djdj82h48djs9d2'),
            ('oauth_token', 'kkk9d7dh3k39sjv7'),
            ('oauth_signature_method', 'HMAC-SHA1'),
            ('oauth_timestamp', '137131201'),
            ('oauth_nonce', '7d8f3e4a'),
            ('c2', ''),
            ('a3', '2 q'),
        ])

    def test_signature_excluded(self):
        """Test that oauth_signature is never a signed parameter."""
        request = RequestDescriptor('GET', 'https://example.com/?oauth_signature=abc')
        params = collect_parameters(
            request,
            {'oauth_signature': 'xyz', 'oauth_nonce': 'n'},
            {'oauth_signature': 'def'}
        )
        assert params == [('oauth_nonce', 'n')]

    def test_values_stringified(self):
        """Test that int and bool extras are converted to strings."""
        request = RequestDescriptor('GET', 'https://example.com')
        params = collect_parameters(request, {}, {'a': 1, 'b': True})
        assert params == [('a', '1'), ('b', 'true')]


class TestNormalizeParameters:
    """Test the normalized parameter string."""

    def test_rfc_example(self):
        """Test the RFC 5849 section 3.4.1.3.2 example."""
        request = RequestDescriptor('POST', RFC_URL)
        params = collect_parameters(request, RFC_OAUTH_PARAMS, RFC_BODY_PARAMS)
        assert normalize_parameters(params) == RFC_NORMALIZED

    def test_ties_broken_by_value(self):
        """Test that equal names are ordered by encoded value."""
        assert normalize_parameters([('a', 'z'), ('a', 'b'), ('a', '2 q')]) == 'a=2%20q&a=b&a=z'

    def test_sorted_on_encoded_bytes(self):
        """Test that sorting uses encoded forms, not raw names."""
        # 'c@' encodes to 'c%40', and '%' sorts before '2'
        assert normalize_parameters([('c2', ''), ('c@', '')]) == 'c%40=&c2='

    def test_uppercase_before_lowercase(self):
        """Test byte-wise ordering puts uppercase first."""
        assert normalize_parameters([('b', '1'), ('B', '2'), ('a', '3')]) == 'B=2&a=3&b=1'

    def test_order_independent(self):
        """Test that the input order does not change the result."""
        params = [('foo', 'bar'), ('a', '1'), ('b', 'true'), ('a', '0')]
        assert normalize_parameters(params) == normalize_parameters(list(reversed(params)))

    def test_empty(self):
        """Test that no parameters give an empty string."""
        assert normalize_parameters([]) == ''

    def test_pairs_decode_to_originals(self):
        """Test that every name=value pair decodes back to its input."""
        params = [('status', 'Hello Ladies + Gentlemen, a signed OAuth request!'), ('c@', 'é&=')]
        normalized = normalize_parameters(params)

        decoded = []
        for pair in normalized.split('&'):
            name, value = pair.split('=')
            decoded.append((percent_decode(name), percent_decode(value)))

        assert sorted(decoded) == sorted(params)


class TestBaseString:
    """Test base string and signing key construction."""

    def test_rfc_example(self):
        """Test the RFC 5849 section 3.4.1.1 example."""
        assert build_base_string('POST', 'http://example.com/request', RFC_NORMALIZED) == RFC_BASE_STRING

    def test_method_upper_cased(self):
        """Test that the method is upper-cased."""
        base_string = build_base_string('post', 'http://example.com/request', RFC_NORMALIZED)
        assert base_string == RFC_BASE_STRING

    def test_signing_key_encodes_secrets(self):
        """Test that both secrets are percent-encoded and joined with '&'."""
        assert build_signing_key('cs', 'ts') == 'cs&ts'
        assert build_signing_key('a&b', 'c d') == 'a%26b&c%20d'
        assert build_signing_key('', '') == '&'


class TestComputeSignature:
    """Test HMAC-SHA1 signature computation."""

    def test_known_signature(self):
        """Test against a signature computed with openssl for the RFC base string."""
        key = build_signing_key('ECrDNoq1VYzzzzzzzzzyAK7TwZNtPnkqatqZZZZ', 'just-a-string    asdasd')
        assert compute_signature(RFC_BASE_STRING, key) == 'wsdNmjGB7lvis0UJuPAmjvX/PXw='
