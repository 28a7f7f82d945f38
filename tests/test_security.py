"""Payment signature verification."""

from drivigo.core.security import verify_payment_signature

from conftest import sign_payment


def test_valid_signature_verifies():
    for order_id, payment_id in [("order_1", "pay_1"), ("order_LX9", "pay_29QQ"), ("", "")]:
        signature = sign_payment("secret", order_id, payment_id)
        assert verify_payment_signature("secret", order_id, payment_id, signature)


def test_one_character_change_fails():
    signature = sign_payment("secret", "order_1", "pay_1")
    flipped = ("0" if signature[-1] != "0" else "1")
    tampered = signature[:-1] + flipped

    assert not verify_payment_signature("secret", "order_1", "pay_1", tampered)


def test_wrong_secret_fails():
    signature = sign_payment("other", "order_1", "pay_1")

    assert not verify_payment_signature("secret", "order_1", "pay_1", signature)


def test_swapped_identifiers_fail():
    signature = sign_payment("secret", "order_1", "pay_1")

    assert not verify_payment_signature("secret", "pay_1", "order_1", signature)


def test_missing_identifiers_sign_as_empty_strings():
    signature = sign_payment("secret", "", "")

    assert verify_payment_signature("secret", None, None, signature)
    assert not verify_payment_signature("secret", "order_1", None, signature)


def test_missing_signature_never_matches():
    assert not verify_payment_signature("secret", "order_1", "pay_1", None)
    assert not verify_payment_signature("secret", "order_1", "pay_1", "")


def test_non_ascii_signature_is_rejected_not_raised():
    assert not verify_payment_signature("secret", "order_1", "pay_1", "sïgnature")
