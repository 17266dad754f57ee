from flask import Blueprint, current_app, jsonify, request

bp = Blueprint('tournaments', __name__, url_prefix='/api/tournaments')


@bp.route('', methods=['GET'])
def list_tournaments():
    """List all tournaments with teams and their players embedded."""
    return jsonify(current_app.tournaments.list_tournaments())


@bp.route('/<tournament_id>', methods=['GET'])
def get_tournament(tournament_id: str):
    return jsonify(current_app.tournaments.get_tournament(tournament_id))


@bp.route('', methods=['POST'])
def create_tournament():
    tournament = current_app.tournaments.create_tournament(request.get_json(silent=True))
    return jsonify(tournament), 201


@bp.route('/<tournament_id>', methods=['PUT'])
def update_tournament(tournament_id: str):
    """Update a tournament. Status may be set to any value explicitly."""
    tournament = current_app.tournaments.update_tournament(
        tournament_id, request.get_json(silent=True)
    )
    return jsonify(tournament)


@bp.route('/<tournament_id>', methods=['DELETE'])
def delete_tournament(tournament_id: str):
    current_app.tournaments.delete_tournament(tournament_id)
    return jsonify({'message': 'Tournament deleted successfully'})
