"""
Per-side projections of the battle state handed to player callbacks.

A side sees its own entities in full. Of the rival it sees public identity,
boosts and HP rescaled to a fixed denominator; bench members stay hidden until
they have been on the field.
"""

import math

from src.battle_sim.constants import PUBLIC_HP_SCALE
from src.battle_sim.schema.battle_pokemon import BattlePokemon
from src.battle_sim.schema.battle_state import BattleState
from src.battle_sim.schema.views import FieldView, OwnTeamView, OwnView, PreviewEntry, PublicPokemon, RivalTeamView, RivalView


def scale_hp(hp: int, max_hp: int, scale: int = PUBLIC_HP_SCALE) -> int:
    """Rescale HP to the public denominator, rounding up so a living entity never shows 0"""
    return math.ceil(hp * scale / max_hp)


def to_public_pokemon(pokemon: BattlePokemon, scale: int = PUBLIC_HP_SCALE) -> PublicPokemon:
    return PublicPokemon(
        uid=pokemon.uid,
        species=pokemon.species,
        name=pokemon.build.name or pokemon.species,
        gender=pokemon.build.gender,
        level=pokemon.build.level,
        types=list(pokemon.types),
        hp=scale_hp(pokemon.hp, pokemon.max_hp, scale),
        max_hp=scale,
        boosts=pokemon.boosts.model_copy(),
        status=pokemon.status,
    )


def build_team_preview(state: BattleState, player_id: int) -> tuple[OwnTeamView, RivalTeamView]:
    player = state.get_player(player_id)
    rival = state.get_player(state.get_rival_id(player_id))
    own_view = OwnTeamView(id=player.id, team=list(player.roster))
    rival_view = RivalTeamView(
        id=rival.id,
        team=[PreviewEntry(species=build.species, gender=build.gender) for build in rival.roster],
    )
    return own_view, rival_view


def build_player_views(state: BattleState, player_id: int, scale: int = PUBLIC_HP_SCALE) -> tuple[OwnView, RivalView, FieldView]:
    """Snapshot views for one side. Everything is copied, so callbacks cannot reach engine state."""
    player = state.get_player(player_id)
    rival = state.get_player(state.get_rival_id(player_id))

    own_view = OwnView(
        id=player.id,
        active=[pokemon.model_copy(deep=True) if pokemon else None for pokemon in player.active],
        bench=[pokemon.model_copy(deep=True) if pokemon else None for pokemon in player.bench],
    )
    rival_view = RivalView(
        id=rival.id,
        active=[to_public_pokemon(pokemon, scale) if pokemon else None for pokemon in rival.active],
        bench=[to_public_pokemon(pokemon, scale) for pokemon in rival.bench if pokemon is not None and pokemon.revealed],
    )
    field_view = FieldView(
        weather=state.field.weather.model_copy() if state.field.weather else None,
        sides=[side.model_copy(deep=True) for side in state.field.sides],
    )
    return own_view, rival_view, field_view
