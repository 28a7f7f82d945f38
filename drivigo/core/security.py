import logging
import razorpay
from typing import Optional
from razorpay.errors import SignatureVerificationError

logger = logging.getLogger(__name__)


def verify_payment_signature(
    secret: str,
    order_id: Optional[str],
    payment_id: Optional[str],
    signature: Optional[str],
) -> bool:
    """
    Checks the signature Razorpay checkout returns for a completed payment:
    HMAC-SHA256 of `<order_id>|<payment_id>` keyed with the key secret.

    Missing identifiers are signed as empty strings; a missing signature
    never matches.
    """
    if not signature or not signature.isascii():
        return False

    # Signature checks never hit the network, so no key id is needed
    client = razorpay.Client(auth=("", secret or ""))
    params = {
        "razorpay_order_id": order_id or "",
        "razorpay_payment_id": payment_id or "",
        "razorpay_signature": signature,
    }

    try:
        client.utility.verify_payment_signature(params)
    except SignatureVerificationError as e:
        logger.debug(f"Payment signature verification failed: {e}")
        return False
    # Only order_id and payment_id are signed, there is no nonce, so a captured
    # (order_id, payment_id, signature) triple verifies again on replay.
    return True
