import pytest

from peerid.encoding_config import (
    DEFAULT_ENCODING,
    set_default_encoding,
)

# RSA 2048 identity shared with the JS implementation's test suite.
RSA_PRIV_KEY = (
    "CAASpgkwggSiAgEAAoIBAQC2SKo/HMFZeBml1AF3XijzrxrfQXdJzjePBZAbdxqKR1Mc6juRHXij6H"
    "XYPjlAk01BhF1S3Ll4Lwi0cAHhggf457sMg55UWyeGKeUv0ucgvCpBwlR5cQ020i0MgzjPWOLWq1rt"
    "vSbNcAi2ZEVn6+Q2EcHo3wUvWRtLeKz+DZSZfw2PEDC+DGPJPl7f8g7zl56YymmmzH9liZLNrzg/qi"
    "dokUv5u1pdGrcpLuPNeTODk0cqKB+OUbuKj9GShYECCEjaybJDl9276oalL9ghBtSeEv20kugatTvY"
    "y590wFlJkkvyl+nPxIH0EEYMKK9XRWlu9XYnoSfboiwcv8M3SlsjAgMBAAECggEAZtju/bcKvKFPz0"
    "mkHiaJcpycy9STKphorpCT83srBVQi59CdFU6Mj+aL/xt0kCPMVigJw8P3/YCEJ9J+rS8BsoWE+xWU"
    "EsJvtXoT7vzPHaAtM3ci1HZd302Mz1+GgS8Epdx+7F5p80XAFLDUnELzOzKftvWGZmWfSeDnslwVON"
    "kL/1VAzwKy7Ce6hk4SxRE7l2NE2OklSHOzCGU1f78ZzVYKSnS5Ag9YrGjOAmTOXDbKNKN/qIorAQ1b"
    "ovzGoCwx3iGIatQKFOxyVCyO1PsJYT7JO+kZbhBWRRE+L7l+ppPER9bdLFxs1t5CrKc078h+wuUr05"
    "S1P1JjXk68pk3+kQKBgQDeK8AR11373Mzib6uzpjGzgNRMzdYNuExWjxyxAzz53NAR7zrPHvXvfIqj"
    "DScLJ4NcRO2TddhXAfZoOPVH5k4PJHKLBPKuXZpWlookCAyENY7+Pd55S8r+a+MusrMagYNljb5WbV"
    "TgN8cgdpim9lbbIFlpN6SZaVjLQL3J8TWH6wKBgQDSChzItkqWX11CNstJ9zJyUE20I7LrpyBJNgG1"
    "gtvz3ZMUQCn3PxxHtQzN9n1P0mSSYs+jBKPuoSyYLt1wwe10/lpgL4rkKWU3/m1Myt0tveJ9WcqHh6"
    "tzcAbb/fXpUFT/o4SWDimWkPkuCb+8j//2yiXk0a/T2f36zKMuZvujqQKBgC6B7BAQDG2H2B/ijofp"
    "12ejJU36nL98gAZyqOfpLJ+FeMz4TlBDQ+phIMhnHXA5UkdDapQ+zA3SrFk+6yGk9Vw4Hf46B+82Sv"
    "OrSbmnMa+PYqKYIvUzR4gg34rL/7AhwnbEyD5hXq4dHwMNsIDq+l2elPjwm/U9V0gdAl2+r50HAoGA"
    "LtsKqMvhv8HucAMBPrLikhXP/8um8mMKFMrzfqZ+otxfHzlhI0L08Bo3jQrb0Z7ByNY6M8epOmbCKA"
    "DsbWcVre/AAY0ZkuSZK/CaOXNX/AhMKmKJh8qAOPRY02LIJRBCpfS4czEdnfUhYV/TYiFNnKRj57PP"
    "YZdTzUsxa/yVTmECgYBr7slQEjb5Onn5mZnGDh+72BxLNdgwBkhO0OCdpdISqk0F0Pxby22DFOKXZE"
    "piyI9XYP1C8wPiJsShGm2yEwBPWXnrrZNWczaVuCbXHrZkWQogBDG3HGXNdU4MAWCyiYlyinIBpPpo"
    "AJZSzpGLmWbMWh28+RJS6AQX6KHrK1o2uw=="
)
RSA_PUB_KEY = (
    "CAASpgIwggEiMA0GCSqGSIb3DQEBAQUAA4IBDwAwggEKAoIBAQC2SKo/HMFZeBml1AF3XijzrxrfQX"
    "dJzjePBZAbdxqKR1Mc6juRHXij6HXYPjlAk01BhF1S3Ll4Lwi0cAHhggf457sMg55UWyeGKeUv0ucg"
    "vCpBwlR5cQ020i0MgzjPWOLWq1rtvSbNcAi2ZEVn6+Q2EcHo3wUvWRtLeKz+DZSZfw2PEDC+DGPJPl"
    "7f8g7zl56YymmmzH9liZLNrzg/qidokUv5u1pdGrcpLuPNeTODk0cqKB+OUbuKj9GShYECCEjaybJD"
    "l9276oalL9ghBtSeEv20kugatTvYy590wFlJkkvyl+nPxIH0EEYMKK9XRWlu9XYnoSfboiwcv8M3Sl"
    "sjAgMBAAE="
)
RSA_ID_HEX = "122019318b6e5e0cf93a2314bf01269a2cc23cd3dcd452d742cdb9379d8646f6e4a9"
RSA_ID_B58 = "QmQ2zigjQikYnyYUSXZydNXrDRhBut2mubwJBaLXobMt3A"
RSA_ID_CID = "bafzbeiazggfw4xqm7e5cgff7aetjulgchtj5zvcs25bm3ojxtwden5xeve"
RSA_ID_DAG_PB_CID = "bafybeiazggfw4xqm7e5cgff7aetjulgchtj5zvcs25bm3ojxtwden5xeve"

# 512-bit RSA identity, below what can be generated but still importable
RSA_512_PRIV_KEY = (
    "CAASvwIwggE7AgEAAkEAzp1hwVv/I/9CW5wF00zkIdTpA7DOIkbzunRbKpUup2wGXLydUATplSWmhg"
    "d2eDS6xZ5929cc1q4qsrHDCQ+qxwIDAQABAkBJ4Qi1ZTnkG0AVFcMXfSUN292+DhiHNSutfjGjFljq"
    "UBewf9VYGp6RjAjwC530K50WqgSAjJrL8qLXkqoNz1TBAiEA6VxQnrxRmsEwzZb6BD64binmhvK4mC"
    "3uK129VGg355cCIQDiqNBvJEBKIPG9VpCrOthKOUdSfmYJKjWIwdqGFqg8UQIhAN7o6bHXXXQgGogo"
    "MYagivfgWm6JqD7lkN4n2tSoAM7dAiEAul/3rDwRxSKbxIWmxbXIXhgFRpb6zfRwOri0OGfvBFECIB"
    "iOfyQCNCoZI98zrdikAVeC3WbOKCoNc/Z2QhRMeI6K"
)
RSA_512_PUB_KEY = (
    "CAASXjBcMA0GCSqGSIb3DQEBAQUAA0sAMEgCQQDOnWHBW/8j/0JbnAXTTOQh1OkDsM4iRvO6dFsqlS"
    "6nbAZcvJ1QBOmVJaaGB3Z4NLrFnn3b1xzWriqyscMJD6rHAgMBAAE="
)
RSA_512_ID_B58 = "QmY7arDs2mKFT3DBDw9JwK253ccqZGxvoNK5nczDukEpoQ"

# RFC 8032 test 1 seed
ED25519_SEED_HEX = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
ED25519_PUB_HEX = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
ED25519_PUB_KEY = "CAESINdamAGCsQq31Uv+08lkBzoO4XLz2qYjJa8CGmj3B1Ea"
ED25519_PRIV_KEY = (
    "CAESQJ1hsZ3v/VpguoRK9JLsLMREScVpezJpGXA7rAMcrn9g11qYAYKxCrfVS/7TyWQHOg7hcvPapi"
    "MlrwIaaPcHURo="
)
ED25519_ID_HEX = "002408011220" + ED25519_PUB_HEX
ED25519_ID_B58 = "12D3KooWQK1wnefoLrcVHbbnf5tLzbopUd3K3bFAoJpA7YJgL5pV"
ED25519_ID_CID = "bafzaajaiaejcbv22taayfmikw7kux7wtzfsaooqo4fzphwvgems26aq2nd3qoui2"
ED25519_PROTOBUF_HEX = (
    "0a26" + ED25519_ID_HEX + "1224080112" + "20" + ED25519_PUB_HEX + "1a44080112"
    "40" + ED25519_SEED_HEX + ED25519_PUB_HEX
)

SECP256K1_SECRET_HEX = (
    "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"
)
SECP256K1_PUB_HEX = (
    "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"
)
SECP256K1_PUB_KEY = "CAISIQM5o2ATMBWX2u9B++WToCzFE9C1VSfsLfEFDi6P9JyFwg=="
SECP256K1_PRIV_KEY = "CAISIOjzLnI97PQFGu+sjiyTycWyFDE4F82wGhSUuRfIQ2s1"
SECP256K1_ID_HEX = "0025080212" + "21" + SECP256K1_PUB_HEX
SECP256K1_ID_B58 = "16Uiu2HAmGXz5Z9Nbh7mCjyeJqeJa9AbXXu9bAHdanvJC7MKTki2m"


@pytest.fixture
def rsa_identity():
    return {
        "id": RSA_ID_B58,
        "privKey": RSA_PRIV_KEY,
        "pubKey": RSA_PUB_KEY,
    }


@pytest.fixture
def ed25519_identity():
    return {
        "id": ED25519_ID_B58,
        "privKey": ED25519_PRIV_KEY,
        "pubKey": ED25519_PUB_KEY,
    }


@pytest.fixture
def secp256k1_identity():
    return {
        "id": SECP256K1_ID_B58,
        "privKey": SECP256K1_PRIV_KEY,
        "pubKey": SECP256K1_PUB_KEY,
    }


@pytest.fixture(autouse=True)
def reset_default_encoding():
    set_default_encoding(DEFAULT_ENCODING)
    yield
    set_default_encoding(DEFAULT_ENCODING)
