from flask import Blueprint, jsonify, current_app

from epex.errors import ConfigurationError, InvalidAmount, InvalidInput, InvalidSignature
from epex.services.payments import make_receipt, verify_payment_signature
from epex.validation import json_body

payments = Blueprint('payments', __name__)

MIN_AMOUNT_PAISE = 100
DEFAULT_CURRENCY = 'INR'

# Work the server does not do yet once a payment checks out
PENDING_ACTIONS = ['record_payment', 'grant_subscription']


@payments.route('/create-order', methods=['POST'])
def create_order():
    data = json_body()
    amount = data.get('amount')
    # bool is an int subclass; reject it explicitly
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < MIN_AMOUNT_PAISE:
        raise InvalidAmount()
    currency = data.get('currency') or DEFAULT_CURRENCY
    if not isinstance(currency, str):
        raise InvalidInput('Invalid currency')

    gateway = current_app.extensions['epex.payments']
    if gateway is None:
        raise ConfigurationError('Razorpay credentials are not configured')

    order = gateway.create_order(amount, currency.upper(), make_receipt())
    current_app.logger.info(f"[order-created] order={order['id']} amount={order['amount']} currency={order['currency']}")
    return jsonify({'success': True, 'order': order})


@payments.route('/verify', methods=['POST'])
def verify_payment():
    data = json_body()
    order_id = data.get('razorpay_order_id')
    payment_id = data.get('razorpay_payment_id')
    signature = data.get('razorpay_signature')
    if not all(isinstance(v, str) and v for v in (order_id, payment_id, signature)):
        raise InvalidInput('Missing payment details')

    settings = current_app.extensions['epex.settings']
    if not verify_payment_signature(order_id, payment_id, signature, settings.razorpay_key_secret):
        current_app.logger.info(f"[verify-failed] order={order_id}")
        raise InvalidSignature()

    current_app.logger.warning(
        f"[verify-ok] order={order_id} payment={payment_id} fulfillment=pending actions={','.join(PENDING_ACTIONS)}"
    )
    return jsonify({
        'success': True,
        'message': 'Payment verified successfully',
        'payment': {'orderId': order_id, 'paymentId': payment_id},
        'fulfillment': 'pending',
        'pendingActions': list(PENDING_ACTIONS),
    })
