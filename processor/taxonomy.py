"""Category taxonomy for every Tokyo 2020 sport.

Category order matters: the classifier picks the first category whose name
prefixes an event name, so broader names listed earlier win over more
specific ones listed later.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CategoryDefinition:
    name: str
    redirect: Optional[str] = None


@dataclass(frozen=True)
class SportDefinition:
    name: str
    icon: str
    categories: List[CategoryDefinition] = field(default_factory=list)


SPORT_DEFINITIONS = [
    SportDefinition(
        "3x3 Basketball",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-bk3.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Archery",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-arc.svg",
        [
            CategoryDefinition("Men's Individual"),
            CategoryDefinition("Men's Team"),
            CategoryDefinition("Women's Individual"),
            CategoryDefinition("Women's Team"),
            CategoryDefinition("Mixed Team"),
        ],
    ),
    SportDefinition(
        "Artistic Gymnastics",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-gar.svg",
        [
            CategoryDefinition("Men's Team"),
            CategoryDefinition("Women's Team"),
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Artistic Swimming",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-swa.svg",
        [
            CategoryDefinition("Duet"),
            CategoryDefinition("Team"),
        ],
    ),
    SportDefinition(
        "Athletics",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-ath.svg",
        [
            CategoryDefinition("Men's 100m"),
            CategoryDefinition("Men's 110m Hurdles"),
            CategoryDefinition("Men's 200m"),
            CategoryDefinition("Men's 400m"),
            CategoryDefinition("Men's 400m Hurdles"),
            CategoryDefinition("Men's 800m"),
            CategoryDefinition("Men's 1500m"),
            CategoryDefinition("Men's 3000m Steeplechase"),
            CategoryDefinition("Men's 5000m"),
            CategoryDefinition("Men's 10,000m"),
            CategoryDefinition("Men's 20km Race Walk"),
            CategoryDefinition("Men's 50km Race Walk"),
            CategoryDefinition("Men's Marathon"),
            CategoryDefinition("Men's High Jump"),
            CategoryDefinition("Men's Long Jump"),
            CategoryDefinition("Men's Triple Jump"),
            CategoryDefinition("Men's Shot Put"),
            CategoryDefinition("Men's Discus Throw"),
            CategoryDefinition("Men's Hammer Throw"),
            CategoryDefinition("Men's Javelin Throw"),
            CategoryDefinition("Men's Pole Vault"),
            CategoryDefinition("Men's Decathlon"),
            CategoryDefinition("Men's 4 x 100m Relay"),
            CategoryDefinition("Men's 4 x 400m Relay"),
            CategoryDefinition("Women's 100m"),
            CategoryDefinition("Women's 100m Hurdles"),
            CategoryDefinition("Women's 200m"),
            CategoryDefinition("Women's 400m"),
            CategoryDefinition("Women's 400m Hurdles"),
            CategoryDefinition("Women's 800m"),
            CategoryDefinition("Women's 1500m"),
            CategoryDefinition("Women's 3000m Steeplechase"),
            CategoryDefinition("Women's 5000m"),
            CategoryDefinition("Women's 10,000m"),
            CategoryDefinition("Women's 20km Race Walk"),
            CategoryDefinition("Women's Marathon"),
            CategoryDefinition("Women's Triple Jump"),
            CategoryDefinition("Women's Long Jump"),
            CategoryDefinition("Women's High Jump"),
            CategoryDefinition("Women's Shot Put"),
            CategoryDefinition("Women's Discus Throw"),
            CategoryDefinition("Women's Hammer Throw"),
            CategoryDefinition("Women's Javelin Throw"),
            CategoryDefinition("Women's Pole Vault"),
            CategoryDefinition("Women's Heptathlon"),
            CategoryDefinition("Women's 4 x 100m Relay"),
            CategoryDefinition("Women's 4 x 400m Relay"),
            CategoryDefinition("Mixed 4 x 400m Relay"),
        ],
    ),
    SportDefinition(
        "Badminton",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-bdm.svg",
        [
            CategoryDefinition("Men's Singles"),
            CategoryDefinition("Men's Doubles"),
            CategoryDefinition("Women's Singles"),
            CategoryDefinition("Women's Doubles"),
            CategoryDefinition("Mixed Doubles"),
        ],
    ),
    SportDefinition(
        "Baseball/Softball",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-bsb.svg",
        [
            CategoryDefinition("Softball"),
            CategoryDefinition("Baseball"),
        ],
    ),
    SportDefinition(
        "Basketball",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-bkb.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Beach Volleyball",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-vbv.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
            CategoryDefinition("Men's or Women's"),
        ],
    ),
    SportDefinition(
        "Boxing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-box.svg",
        [
            CategoryDefinition("Men's Fly (48-52kg)"),
            CategoryDefinition("Men's Feather (52-57kg)"),
            CategoryDefinition("Men's Light (57-63kg)"),
            CategoryDefinition("Men's Welter (63-69kg)"),
            CategoryDefinition("Men's Middle (69-75kg)"),
            CategoryDefinition("Men's Light Heavy (75-81kg)"),
            CategoryDefinition("Men's Heavy (81-91kg)"),
            CategoryDefinition("Men's Super Heavy (+91kg)"),
            CategoryDefinition("Women's Fly (48-51kg)"),
            CategoryDefinition("Women's Feather (54-57kg)"),
            CategoryDefinition("Women's Light (57-60kg)"),
            CategoryDefinition("Women's Welter (64-69kg)"),
            CategoryDefinition("Women's Middle (69-75kg)"),
        ],
    ),
    SportDefinition(
        "Canoe Slalom",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-csl.svg",
        [
            CategoryDefinition("Canoe (C1) Men"),
            CategoryDefinition("Kayak (K1) Men"),
            CategoryDefinition("Canoe (C1) Women"),
            CategoryDefinition("Kayak (K1) Women"),
        ],
    ),
    SportDefinition(
        "Canoe Sprint",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-csp.svg",
        [
            CategoryDefinition("Men's Canoe Single 1000m"),
            CategoryDefinition("Men's Canoe Double 1000m"),
            CategoryDefinition("Men's Kayak Single 200m"),
            CategoryDefinition("Men's Kayak Single 1000m"),
            CategoryDefinition("Men's Kayak Double 1000m"),
            CategoryDefinition("Men's Kayak Four 500m"),
            CategoryDefinition("Women's Canoe Single 200m"),
            CategoryDefinition("Women's Canoe Double 500m"),
            CategoryDefinition("Women's Kayak Single 200m"),
            CategoryDefinition("Women's Kayak Single 500m"),
            CategoryDefinition("Women's Kayak Double 500m"),
            CategoryDefinition("Women's Kayak Four 500m"),
        ],
    ),
    SportDefinition(
        "Cycling BMX Freestyle",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-bmf.svg",
        [
            CategoryDefinition("Men's Park"),
            CategoryDefinition("Women's Park"),
        ],
    ),
    SportDefinition(
        "Cycling BMX Racing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-bmx.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Cycling Mountain Bike",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-mtb.svg",
        [
            CategoryDefinition("Men's Cross-country"),
            CategoryDefinition("Women's Cross-country"),
        ],
    ),
    SportDefinition(
        "Cycling Road",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-crd.svg",
        [
            CategoryDefinition("Men's Road Race"),
            CategoryDefinition("Men's Individual Time Trial"),
            CategoryDefinition("Women's Road Race"),
            CategoryDefinition("Women's Individual Time Trial"),
        ],
    ),
    SportDefinition(
        "Cycling Track",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-ctr.svg",
        [
            CategoryDefinition("Men's Sprint"),
            CategoryDefinition("Men's Keirin"),
            CategoryDefinition("Men's Madison"),
            CategoryDefinition("Men's Omnium"),
            CategoryDefinition("Men's Team Sprint"),
            CategoryDefinition("Men's Team Pursuit"),
            CategoryDefinition("Women's Sprint"),
            CategoryDefinition("Women's Keirin"),
            CategoryDefinition("Women's Madison"),
            CategoryDefinition("Women's Omnium"),
            CategoryDefinition("Women's Team Sprint"),
            CategoryDefinition("Women's Team Pursuit"),
        ],
    ),
    SportDefinition(
        "Diving",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-div.svg",
        [
            CategoryDefinition("Men's 3m Springboard"),
            CategoryDefinition("Men's 10m Platform"),
            CategoryDefinition("Men's Synchronised 3m Springboard"),
            CategoryDefinition("Men's Synchronised 10m Platform"),
            CategoryDefinition("Women's 3m Springboard"),
            CategoryDefinition("Women's 10m Platform"),
            CategoryDefinition("Women's Synchronised 3m Springboard"),
            CategoryDefinition("Women's Synchronised 10m Platform"),
        ],
    ),
    SportDefinition(
        "Equestrian",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-equ.svg",
        [
            CategoryDefinition("Dressage Grand Prix Team and Individual"),
            CategoryDefinition("Eventing Dressage Team and Individual"),
            CategoryDefinition("Eventing Cross Country Team and Individual"),
            CategoryDefinition("Eventing Jumping Team"),
            CategoryDefinition("Eventing Jumping Individual"),
            CategoryDefinition("Dressage Individual"),
            CategoryDefinition("Dressage Team"),
            CategoryDefinition("Eventing Individual"),
            CategoryDefinition("Eventing Team"),
            CategoryDefinition("Jumping Individual"),
            CategoryDefinition("Jumping Team"),
        ],
    ),
    SportDefinition(
        "Fencing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-fen.svg",
        [
            CategoryDefinition("Men's Epée Individual"),
            CategoryDefinition("Men's Foil Individual"),
            CategoryDefinition("Men's Sabre Individual"),
            CategoryDefinition("Men's Epée Team"),
            CategoryDefinition("Men's Foil Team"),
            CategoryDefinition("Men's Sabre Team"),
            CategoryDefinition("Women's Epée Individual"),
            CategoryDefinition("Women's Foil Individual"),
            CategoryDefinition("Women's Sabre Individual"),
            CategoryDefinition("Women's Epée Team"),
            CategoryDefinition("Women's Foil Team"),
            CategoryDefinition("Women's Sabre Team"),
        ],
    ),
    SportDefinition(
        "Football",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-fbl.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Golf",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-glf.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Handball",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-hbl.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Hockey",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-hoc.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Judo",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-jud.svg",
        [
            CategoryDefinition("Men -60 kg"),
            CategoryDefinition("Men -66 kg"),
            CategoryDefinition("Men -73 kg"),
            CategoryDefinition("Men -81 kg"),
            CategoryDefinition("Men -90 kg"),
            CategoryDefinition("Men -100 kg"),
            CategoryDefinition("Men +100 kg"),
            CategoryDefinition("Women -48 kg"),
            CategoryDefinition("Women -52 kg"),
            CategoryDefinition("Women -57 kg"),
            CategoryDefinition("Women -63 kg"),
            CategoryDefinition("Women -70 kg"),
            CategoryDefinition("Women -78 kg"),
            CategoryDefinition("Women +78 kg"),
            CategoryDefinition("Mixed Team"),
        ],
    ),
    SportDefinition(
        "Karate",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-kte.svg",
        [
            CategoryDefinition("Men's Kumite -67 kg"),
            CategoryDefinition("Men's Kumite -75 kg"),
            CategoryDefinition("Men's Kumite +75 kg"),
            CategoryDefinition("Men's Kata"),
            CategoryDefinition("Women's Kumite -55 kg"),
            CategoryDefinition("Women's Kumite -61 kg"),
            CategoryDefinition("Women's Kumite +61 kg"),
            CategoryDefinition("Women's Kata"),
        ],
    ),
    SportDefinition(
        "Marathon Swimming",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-ows.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Modern Pentathlon",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-mpn.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Rhythmic Gymnastics",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-gry.svg",
        [
            CategoryDefinition("Individual All-Around"),
            CategoryDefinition("Group All-Around"),
        ],
    ),
    SportDefinition(
        "Rowing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-row.svg",
        [
            CategoryDefinition("Men's Single Sculls"),
            CategoryDefinition("Men's Double Sculls"),
            CategoryDefinition("Lightweight Men's Double Sculls"),
            CategoryDefinition("Men's Quadruple Sculls"),
            CategoryDefinition("Men's Pair"),
            CategoryDefinition("Men's Four"),
            CategoryDefinition("Men's Eight"),
            CategoryDefinition("Women's Single Sculls"),
            CategoryDefinition("Women's Double Sculls"),
            CategoryDefinition("Lightweight Women's Double Sculls"),
            CategoryDefinition("Women's Quadruple Sculls"),
            CategoryDefinition("Women's Pair"),
            CategoryDefinition("Women's Four"),
            CategoryDefinition("Women's Eight"),
        ],
    ),
    SportDefinition(
        "Rugby",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-rug.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Sailing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-sal.svg",
        [
            CategoryDefinition("RS:X Men"),
            CategoryDefinition("Laser Men"),
            CategoryDefinition("Finn Men"),
            CategoryDefinition("49er Men"),
            CategoryDefinition("470 Men"),
            CategoryDefinition("RS:X Women"),
            CategoryDefinition("Laser Radial Women"),
            CategoryDefinition("49er FX Women"),
            CategoryDefinition("470 Women"),
            CategoryDefinition("Foiling Nacra 17 Mixed"),
        ],
    ),
    SportDefinition(
        "Shooting",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-sho.svg",
        [
            CategoryDefinition("10m Air Pistol Men's"),
            CategoryDefinition("25m Rapid Fire Pistol Men's"),
            CategoryDefinition("10m Air Rifle Men's"),
            CategoryDefinition("50m Rifle 3 Positions Men's"),
            CategoryDefinition("Skeet Men's"),
            CategoryDefinition("Trap Men's"),
            CategoryDefinition("10m Air Pistol Women's"),
            CategoryDefinition("25m Pistol Women's"),
            CategoryDefinition("10m Air Rifle Women's"),
            CategoryDefinition("50m Rifle 3 Positions Women's"),
            CategoryDefinition("Skeet Women's"),
            CategoryDefinition("Trap Women's"),
            CategoryDefinition("10m Air Pistol Mixed Team"),
            CategoryDefinition("10m Air Rifle Mixed Team"),
            CategoryDefinition("Trap Mixed Team"),
        ],
    ),
    SportDefinition(
        "Skateboarding",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-skb.svg",
        [
            CategoryDefinition("Men's Street"),
            CategoryDefinition("Men's Park"),
            CategoryDefinition("Women's Street"),
            CategoryDefinition("Women's Park"),
        ],
    ),
    SportDefinition(
        "Sport Climbing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-clb.svg",
        [
            CategoryDefinition("Men's Combined"),
            CategoryDefinition("Women's Combined"),
        ],
    ),
    SportDefinition(
        "Surfing",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-srf.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Swimming",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-swm.svg",
        [
            CategoryDefinition("Men's 50m Freestyle"),
            CategoryDefinition("Men's 100m Freestyle"),
            CategoryDefinition("Men's 100m Backstroke"),
            CategoryDefinition("Men's 100m Breaststroke"),
            CategoryDefinition("Men's 100m Butterfly"),
            CategoryDefinition("Men's 200m Freestyle"),
            CategoryDefinition("Men's 200m Backstroke"),
            CategoryDefinition("Men's 200m Breaststroke"),
            CategoryDefinition("Men's 200m Butterfly"),
            CategoryDefinition("Men's 200m Individual Medley"),
            CategoryDefinition("Men's 400m Freestyle"),
            CategoryDefinition("Men's 400m Individual Medley"),
            CategoryDefinition("Men's 800m Freestyle"),
            CategoryDefinition("Men's 1500m Freestyle"),
            CategoryDefinition("Men's 4 x 100m Freestyle Relay"),
            CategoryDefinition("Men's 4 x 100m Medley Relay"),
            CategoryDefinition("Men's 4 x 200m Freestyle Relay"),
            CategoryDefinition(
                "Men's 4 x 200m Freestyle",
                redirect="Men's 4 x 200m Freestyle Relay",
            ),
            CategoryDefinition("Women's 50m Freestyle"),
            CategoryDefinition("Women's 100m Freestyle"),
            CategoryDefinition("Women's 100m Backstroke"),
            CategoryDefinition("Women's 100m Breaststroke"),
            CategoryDefinition("Women's 100m Butterfly"),
            CategoryDefinition("Women's 200m Freestyle"),
            CategoryDefinition("Women's 200m Backstroke"),
            CategoryDefinition("Women's 200m Breaststroke"),
            CategoryDefinition("Women's 200m Butterfly"),
            CategoryDefinition("Women's 200m Individual Medley"),
            CategoryDefinition("Women's 400m Freestyle"),
            CategoryDefinition("Women's 400m Individual Medley"),
            CategoryDefinition("Women's 800m Freestyle"),
            CategoryDefinition("Women's 1500m Freestyle"),
            CategoryDefinition("Women's 4 x 100m Freestyle Relay"),
            CategoryDefinition("Women's 4 x 100m Medley Relay"),
            CategoryDefinition("Women's 4 x 200m Freestyle Relay"),
            CategoryDefinition("Mixed 4 x 100m Medley Relay"),
        ],
    ),
    SportDefinition(
        "Table Tennis",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-tte.svg",
        [
            CategoryDefinition("Men's Singles"),
            CategoryDefinition("Men's Team"),
            CategoryDefinition("Women's Singles"),
            CategoryDefinition("Women's Team"),
            CategoryDefinition("Mixed Doubles"),
        ],
    ),
    SportDefinition(
        "Taekwondo",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-tkw.svg",
        [
            CategoryDefinition("Men -58 kg"),
            CategoryDefinition("Men -68 kg"),
            CategoryDefinition("Men -80 kg"),
            CategoryDefinition("Men +80 kg"),
            CategoryDefinition("Women -49 kg"),
            CategoryDefinition("Women -57 kg"),
            CategoryDefinition("Women -67 kg"),
            CategoryDefinition("Women +67 kg"),
        ],
    ),
    SportDefinition(
        "Tennis",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-ten.svg",
        [
            CategoryDefinition("Men's Singles"),
            CategoryDefinition("Men's Doubles"),
            CategoryDefinition("Women's Singles"),
            CategoryDefinition("Women's Doubles"),
            CategoryDefinition("Mixed Doubles"),
        ],
    ),
    SportDefinition(
        "Trampoline Gymnastics",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-gtr.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Triathlon",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-tri.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Men", redirect="Men's"),
            CategoryDefinition("Women's"),
            CategoryDefinition("Women", redirect="Women's"),
            CategoryDefinition("Mixed Relay"),
        ],
    ),
    SportDefinition(
        "Volleyball",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-vvo.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Water Polo",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-wpo.svg",
        [
            CategoryDefinition("Men's"),
            CategoryDefinition("Women's"),
        ],
    ),
    SportDefinition(
        "Weightlifting",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-wlf.svg",
        [
            CategoryDefinition("Men's 61 kg Group B and Men's 67 kg Group B"),
            CategoryDefinition("Men's 81 kg Group B and Men's 96 kg Group B"),
            CategoryDefinition("Women's 59 kg Group B and Women's 64 kg Group B"),
            CategoryDefinition("Women's 87 kg Group B and Women's +87 kg Group B"),
            CategoryDefinition("Men's 61 kg"),
            CategoryDefinition("Men's 67 kg"),
            CategoryDefinition("Men's 73 kg"),
            CategoryDefinition("Men's 81 kg"),
            CategoryDefinition("Men's 96 kg"),
            CategoryDefinition("Men's 109 kg"),
            CategoryDefinition("Men's +109 kg"),
            CategoryDefinition("Women's 49 kg"),
            CategoryDefinition("Women's 55 kg"),
            CategoryDefinition("Women's 59 kg"),
            CategoryDefinition("Women's 64 kg"),
            CategoryDefinition("Women's 76 kg"),
            CategoryDefinition("Women's 87 kg"),
            CategoryDefinition("Women's +87 kg"),
        ],
    ),
    SportDefinition(
        "Wrestling",
        "/tokyo-2020/en/d3images/pictograms/olympics/picto-wre.svg",
        [
            CategoryDefinition("Men's Greco-Roman 60 kg"),
            CategoryDefinition("Men's Greco-Roman 67 kg"),
            CategoryDefinition("Men's Greco-Roman 77 kg"),
            CategoryDefinition("Men's Greco-Roman 87 kg"),
            CategoryDefinition("Men's Greco-Roman 97 kg"),
            CategoryDefinition("Men's Greco-Roman 130 kg"),
            CategoryDefinition("Men's Freestyle 57 kg"),
            CategoryDefinition("Men's Freestyle 65 kg"),
            CategoryDefinition("Men's Freestyle 74 kg"),
            CategoryDefinition("Men's Freestyle 86 kg"),
            CategoryDefinition("Men's Freestyle 97 kg"),
            CategoryDefinition("Men's Freestyle 125 kg"),
            CategoryDefinition("Women's Freestyle 50 kg"),
            CategoryDefinition("Women's Freestyle 53 kg"),
            CategoryDefinition("Women's Freestyle 57 kg"),
            CategoryDefinition("Women's Freestyle 62 kg"),
            CategoryDefinition("Women's Freestyle 76 kg"),
            CategoryDefinition("Women's Freestyle 68 kg"),
        ],
    ),
]
