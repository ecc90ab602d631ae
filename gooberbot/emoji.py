"""Custom emoji markup used in bot messages."""

from __future__ import annotations

import re
from typing import NamedTuple


class _Emoji(NamedTuple):
    name: str
    debug_id: str
    release_id: str
    animated: bool = False


_EMOJIS = (
    _Emoji("explosion", "1330040514405470311", "1330044953132400703", True),
    _Emoji("floof", "1263605435785810104", "1263609061539315722"),
    _Emoji("floofAngry", "1263605462927016077", "1263609077661962331"),
    _Emoji("floofBlep", "1263605485488308295", "1263609094791495724"),
    _Emoji("floofCat", "1263605506593915053", "1263609111581560862"),
    _Emoji("floofCool", "1263605526160474112", "1263609129683910761"),
    _Emoji("floofCry", "1263605545852600393", "1263609147824410684"),
    _Emoji("floofDrool", "1263605564035039323", "1263609166875066438"),
    _Emoji("floofHappy", "1263605580380110890", "1263609184415383613"),
    _Emoji("floofHeart", "1263605598524539001", "1263609201431675002"),
    _Emoji("floofInnocent", "1263605617034006619", "1263609220725608519"),
    _Emoji("floofLoad", "1263605636411949118", "1263609237762871336"),
    _Emoji("floofLoadAnimated", "1263605189995266058", "1263609041179906059", True),
    _Emoji("floofLol", "1263605657886654495", "1263609255647510668"),
    _Emoji("floofLurk", "1263605681420894258", "1263609272818729082"),
    _Emoji("floofMischief", "1263605706733650041", "1263609299838697552"),
    _Emoji("floofMug", "1263605736517271634", "1263609319555993792"),
    _Emoji("floofNervous", "1263605768700301386", "1263609339013501008"),
    _Emoji("floofNom", "1263605793710800897", "1263609382801903666"),
    _Emoji("floofOwo", "1263605821338816583", "1263609400732418089"),
    _Emoji("floofPat", "1263605857300643951", "1263609418214543371"),
    _Emoji("floofPeek", "1263605875906449570", "1263609437726179479"),
    _Emoji("floofPlead", "1263605895930052668", "1263609456760062072"),
    _Emoji("floofSad", "1263605923188965428", "1263609478440288317"),
    _Emoji("floofScared", "1263605944839831614", "1263609529820647544"),
    _Emoji("floofSmug", "1263605963877912577", "1263609552356773971"),
    _Emoji("floofTeehee", "1263605984115560478", "1263609577815933061"),
    _Emoji("floofTired", "1263606003082199131", "1263609597382496308"),
    _Emoji("floofWhat", "1263606024892321945", "1263609615036190821"),
    _Emoji("floofWoozy", "1263606042840010752", "1263609632333762592"),
    _Emoji("iAmTheLaw", "1360451308770955275", "1360450936056840313"),
)


def constant_name(name: str) -> str:
    """Turn a camelCase emoji name into its SCREAMING_SNAKE_CASE constant name."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()


def emoji_string(name: str, emoji_id: str, animated: bool = False) -> str:
    """Build the message markup for a custom emoji."""
    prefix = "a" if animated else ""
    return f"<{prefix}:{name}:{emoji_id}>"


def emoji_table(release: bool = True) -> dict[str, str]:
    """Map constant names to emoji markup, using release or development ids."""
    return {
        constant_name(emoji.name): emoji_string(
            emoji.name,
            emoji.release_id if release else emoji.debug_id,
            emoji.animated,
        )
        for emoji in _EMOJIS
    }


_RELEASE = emoji_table(True)

EXPLOSION = _RELEASE["EXPLOSION"]
FLOOF = _RELEASE["FLOOF"]
FLOOF_ANGRY = _RELEASE["FLOOF_ANGRY"]
FLOOF_BLEP = _RELEASE["FLOOF_BLEP"]
FLOOF_CAT = _RELEASE["FLOOF_CAT"]
FLOOF_COOL = _RELEASE["FLOOF_COOL"]
FLOOF_CRY = _RELEASE["FLOOF_CRY"]
FLOOF_DROOL = _RELEASE["FLOOF_DROOL"]
FLOOF_HAPPY = _RELEASE["FLOOF_HAPPY"]
FLOOF_HEART = _RELEASE["FLOOF_HEART"]
FLOOF_INNOCENT = _RELEASE["FLOOF_INNOCENT"]
FLOOF_LOAD = _RELEASE["FLOOF_LOAD"]
FLOOF_LOAD_ANIMATED = _RELEASE["FLOOF_LOAD_ANIMATED"]
FLOOF_LOL = _RELEASE["FLOOF_LOL"]
FLOOF_LURK = _RELEASE["FLOOF_LURK"]
FLOOF_MISCHIEF = _RELEASE["FLOOF_MISCHIEF"]
FLOOF_MUG = _RELEASE["FLOOF_MUG"]
FLOOF_NERVOUS = _RELEASE["FLOOF_NERVOUS"]
FLOOF_NOM = _RELEASE["FLOOF_NOM"]
FLOOF_OWO = _RELEASE["FLOOF_OWO"]
FLOOF_PAT = _RELEASE["FLOOF_PAT"]
FLOOF_PEEK = _RELEASE["FLOOF_PEEK"]
FLOOF_PLEAD = _RELEASE["FLOOF_PLEAD"]
FLOOF_SAD = _RELEASE["FLOOF_SAD"]
FLOOF_SCARED = _RELEASE["FLOOF_SCARED"]
FLOOF_SMUG = _RELEASE["FLOOF_SMUG"]
FLOOF_TEEHEE = _RELEASE["FLOOF_TEEHEE"]
FLOOF_TIRED = _RELEASE["FLOOF_TIRED"]
FLOOF_WHAT = _RELEASE["FLOOF_WHAT"]
FLOOF_WOOZY = _RELEASE["FLOOF_WOOZY"]
I_AM_THE_LAW = _RELEASE["I_AM_THE_LAW"]