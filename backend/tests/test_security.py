# 보안 유닛 테스트 (DB 의존성 없음)
from accounts.core.security import get_password_hash, verify_password

def test_password_hash_and_verify():
    pw = "S3cure!"
    hashed = get_password_hash(pw)
    assert hashed != pw
    assert verify_password(pw, hashed)
    assert not verify_password("wrong", hashed)

def test_password_hash_is_salted():
    assert get_password_hash("secret1") != get_password_hash("secret1")

def test_bcrypt_rounds_follow_settings():
    hashed = get_password_hash("secret1")
    assert hashed.startswith("$2b$04$")
