"""
Alias rule tables.

NICKNAME_RULES are evaluated against the uppercased canonical band name,
SCHOOL_RULES against the uppercased school name. Each rule whose pattern is
contained (and whose `unless` pattern is not) contributes its aliases.

Short codes in SCHOOL_RULES carry a distinguishing prefix where two schools would
otherwise collide (e.g. "tnsu" vs "txsu", "alasu" vs "albysu").
"""

from typing import Dict, List, NamedTuple, Optional, Tuple


class AliasRule(NamedTuple):
    contains: Tuple[str, ...]
    aliases: Tuple[str, ...]
    unless: Optional[str] = None

    def applies(self, upper_text: str) -> bool:
        if self.unless and self.unless in upper_text:
            return False
        return any(pattern in upper_text for pattern in self.contains)


# Region code -> spelled names used in school names.
REGION_NAMES: Dict[str, List[str]] = {
    "AL": ["Alabama", "Bama"],
    "AR": ["Arkansas"],
    "DE": ["Delaware"],
    "DC": ["Washington DC", "D.C.", "DC"],
    "FL": ["Florida", "Fla"],
    "GA": ["Georgia"],
    "LA": ["Louisiana"],
    "MD": ["Maryland"],
    "MS": ["Mississippi", "Miss"],
    "NC": ["North Carolina", "N.C."],
    "OH": ["Ohio"],
    "OK": ["Oklahoma"],
    "SC": ["South Carolina", "S.C."],
    "TN": ["Tennessee", "Tenn"],
    "TX": ["Texas"],
    "VA": ["Virginia"],
}


def region_code_for(name: str) -> Optional[str]:
    """Region code whose spelled names include `name` (case-insensitive)."""
    lowered = name.lower()
    for code, names in REGION_NAMES.items():
        if any(n.lower() == lowered for n in names):
            return code
    return None


NICKNAME_RULES: List[AliasRule] = [
    AliasRule(("SONIC BOOM",), ("sonic boom", "boom")),
    AliasRule(("MARCHING 100",), ("marching 100", "the 100", "famu marching")),
    AliasRule(("HUMAN JUKEBOX",), ("human jukebox", "jukebox", "the jukebox")),
    AliasRule(("WORLD FAMED",), ("world famed", "tiger band", "grambling band")),
    AliasRule(("101",), ("101", "the 101", "101 band"), unless="MARCHING 100"),
    AliasRule(("SHOWTIME",), ("showtime", "showtime band")),
    AliasRule(("ARISTOCRAT",), ("aristocrat", "aristocrat of bands")),
    AliasRule(("OCEAN OF SOUL",), ("ocean of soul", "oos", "ocean")),
    AliasRule(("MARCHING STORM",), ("marching storm", "the storm")),
]


# Applied with the A&T spelled-out variant, ahead of the "State University" forms.
JOINER_RULES: List[AliasRule] = [
    AliasRule(("NORTH CAROLINA A&T",), ("nc a&t", "ncat", "nc at", "a&t", "north carolina a&t")),
]


SCHOOL_RULES: List[AliasRule] = [
    AliasRule(("JACKSON STATE",), ("jsu", "j-state", "jackson st", "jackson")),
    AliasRule(("SOUTHERN UNIVERSITY",), ("subr", "southern", "southern u", "southern university baton rouge")),
    AliasRule(("FLORIDA A&M",), ("famu", "florida am", "florida a&m", "fam")),
    AliasRule(("GRAMBLING",), ("gsu", "grambling", "grambling st")),
    AliasRule(("HOWARD",), ("howard", "howard u", "howard university")),
    AliasRule(("TENNESSEE STATE",), ("tnsu", "tennessee st", "tn state", "tennessee state")),
    AliasRule(("TEXAS SOUTHERN",), ("txsu", "texas southern", "tx southern")),
    AliasRule(("PRAIRIE VIEW",), ("pvamu", "pv", "prairie view")),
    AliasRule(("NORFOLK STATE",), ("nsu", "norfolk", "norfolk st")),
    AliasRule(("HAMPTON",), ("hampton", "hampton u", "hampton university")),
    AliasRule(("MORGAN STATE",), ("msu", "morgan", "morgan st")),
    AliasRule(("SOUTH CAROLINA STATE",), ("scsu", "sc state", "south carolina st")),
    AliasRule(("BETHUNE-COOKMAN", "BETHUNE COOKMAN"), ("bcu", "b-cu", "bethune", "bethune cookman")),
    AliasRule(("ALABAMA A&M",), ("aamu", "alabama am")),
    AliasRule(("ALABAMA STATE",), ("alasu", "bama state", "alabama st", "alabama state")),
    AliasRule(("ALCORN",), ("alcorn", "alcorn st", "alcorn state")),
    AliasRule(("MISSISSIPPI VALLEY",), ("mvsu", "valley", "miss valley")),
    AliasRule(("NORTH CAROLINA CENTRAL",), ("nccu", "ncc", "central")),
    AliasRule(("WINSTON-SALEM", "WINSTON SALEM"), ("wssu", "winston salem", "winston-salem")),
    AliasRule(("FAYETTEVILLE STATE",), ("faysu", "fayetteville", "fayetteville state")),
    AliasRule(("CLARK ATLANTA",), ("cau", "clark", "clark atlanta")),
    AliasRule(("MOREHOUSE",), ("morehouse", "house")),
    AliasRule(("BOWIE STATE",), ("bowsu", "bowie", "bowie state")),
    AliasRule(("DELAWARE STATE",), ("desu", "delaware", "del state")),
    AliasRule(("CENTRAL STATE",), ("csosu", "central state", "central state ohio")),
    AliasRule(("LANGSTON",), ("langston", "langston university")),
    AliasRule(("TUSKEGEE",), ("tuskegee", "tuskegee university")),
    AliasRule(("MILES COLLEGE",), ("miles", "miles college")),
    AliasRule(("ALBANY STATE",), ("albysu", "albany", "albany state")),
    AliasRule(("FORT VALLEY",), ("fvsu", "fort valley")),
    AliasRule(("SAVANNAH STATE",), ("ssu", "savannah")),
    AliasRule(("ELIZABETH CITY",), ("ecsu", "elizabeth city")),
    AliasRule(("VIRGINIA STATE",), ("vasu", "va state", "virginia st", "virginia state")),
]
