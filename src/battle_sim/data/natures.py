from src.battle_sim.enums import Stat
from src.battle_sim.schema.species_info import NatureInfo

ATK = Stat.ATTACK
DEF = Stat.DEFENSE
SPA = Stat.SP_ATTACK
SPD = Stat.SP_DEFENSE
SPE = Stat.SPEED

NATURES: dict[str, NatureInfo] = {
    "adamant": NatureInfo(id="adamant", name="Adamant", plus=ATK, minus=SPA),
    "bashful": NatureInfo(id="bashful", name="Bashful"),
    "bold": NatureInfo(id="bold", name="Bold", plus=DEF, minus=ATK),
    "brave": NatureInfo(id="brave", name="Brave", plus=ATK, minus=SPE),
    "calm": NatureInfo(id="calm", name="Calm", plus=SPD, minus=ATK),
    "careful": NatureInfo(id="careful", name="Careful", plus=SPD, minus=SPA),
    "docile": NatureInfo(id="docile", name="Docile"),
    "gentle": NatureInfo(id="gentle", name="Gentle", plus=SPD, minus=DEF),
    "hardy": NatureInfo(id="hardy", name="Hardy"),
    "hasty": NatureInfo(id="hasty", name="Hasty", plus=SPE, minus=DEF),
    "impish": NatureInfo(id="impish", name="Impish", plus=DEF, minus=SPA),
    "jolly": NatureInfo(id="jolly", name="Jolly", plus=SPE, minus=SPA),
    "lax": NatureInfo(id="lax", name="Lax", plus=DEF, minus=SPD),
    "lonely": NatureInfo(id="lonely", name="Lonely", plus=ATK, minus=DEF),
    "mild": NatureInfo(id="mild", name="Mild", plus=SPA, minus=DEF),
    "modest": NatureInfo(id="modest", name="Modest", plus=SPA, minus=ATK),
    "naive": NatureInfo(id="naive", name="Naive", plus=SPE, minus=SPD),
    "naughty": NatureInfo(id="naughty", name="Naughty", plus=ATK, minus=SPD),
    "quiet": NatureInfo(id="quiet", name="Quiet", plus=SPA, minus=SPE),
    "quirky": NatureInfo(id="quirky", name="Quirky"),
    "rash": NatureInfo(id="rash", name="Rash", plus=SPA, minus=SPD),
    "relaxed": NatureInfo(id="relaxed", name="Relaxed", plus=DEF, minus=SPE),
    "sassy": NatureInfo(id="sassy", name="Sassy", plus=SPD, minus=SPE),
    "serious": NatureInfo(id="serious", name="Serious"),
    "timid": NatureInfo(id="timid", name="Timid", plus=SPE, minus=ATK),
}
