from flask import Blueprint, current_app, jsonify, request

bp = Blueprint('teams', __name__, url_prefix='/api/teams')


@bp.route('', methods=['GET'])
def list_teams():
    """List all teams with their players embedded."""
    return jsonify(current_app.teams.list_teams())


@bp.route('/<team_id>', methods=['GET'])
def get_team(team_id: str):
    return jsonify(current_app.teams.get_team(team_id))


@bp.route('', methods=['POST'])
def create_team():
    team = current_app.teams.create_team(request.get_json(silent=True))
    return jsonify(team), 201


@bp.route('/<team_id>', methods=['PUT'])
def update_team(team_id: str):
    team = current_app.teams.update_team(team_id, request.get_json(silent=True))
    return jsonify(team)


@bp.route('/<team_id>', methods=['DELETE'])
def delete_team(team_id: str):
    current_app.teams.delete_team(team_id)
    return jsonify({'message': 'Team deleted successfully'})
