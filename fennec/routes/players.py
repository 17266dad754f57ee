from flask import Blueprint, current_app, jsonify, request

bp = Blueprint('players', __name__, url_prefix='/api/players')


@bp.route('', methods=['GET'])
def list_players():
    """List all players, ordered by jersey number."""
    return jsonify(current_app.players.list_players())


@bp.route('/<player_id>', methods=['GET'])
def get_player(player_id: str):
    return jsonify(current_app.players.get_player(player_id))


@bp.route('', methods=['POST'])
def create_player():
    player = current_app.players.create_player(request.get_json(silent=True))
    return jsonify(player), 201


@bp.route('/<player_id>', methods=['PUT'])
def update_player(player_id: str):
    player = current_app.players.update_player(player_id, request.get_json(silent=True))
    return jsonify(player)


@bp.route('/<player_id>', methods=['DELETE'])
def delete_player(player_id: str):
    current_app.players.delete_player(player_id)
    return jsonify({'message': 'Player deleted successfully'})
