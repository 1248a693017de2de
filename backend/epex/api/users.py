from flask import Blueprint, jsonify, current_app
from flask_login import login_required, current_user

from epex.errors import InvalidInput, NotFound
from epex.validation import json_body

users = Blueprint('users', __name__)


@users.route('/me', methods=['GET'])
@login_required
def me():
    user = current_app.extensions['epex.users'].find_by_id(current_user.id)
    if user is None:
        raise NotFound('User not found')
    return jsonify({'success': True, 'user': user.to_dict()})


@users.route('/vip', methods=['PUT'])
@login_required
def update_vip():
    data = json_body()
    updates = {
        field: data[key]
        for key, field in (('isVip', 'is_vip'), ('isPremium', 'is_premium'))
        if isinstance(data.get(key), bool)
    }
    if not updates:
        raise InvalidInput('isVip or isPremium must be provided as boolean')

    user = current_app.extensions['epex.users'].update_status(current_user.id, **updates)
    current_app.logger.info(
        f"[status-update] user={user.id} is_vip={user.is_vip} is_premium={user.is_premium}"
    )
    return jsonify({
        'success': True,
        'message': 'User status updated successfully',
        'user': user.to_dict(),
    })
