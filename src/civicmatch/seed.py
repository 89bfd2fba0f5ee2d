"""Bundled authority directory for the launch cities.

Jurisdiction prefixes are the precision-4 cells around each city centre.
Matching only compares the first three characters, so Mumbai and Kalyan
(both under "te7") see each other's authorities in the geohash tier.
"""

from typing import Any, Dict, List

from .directory import StaticAuthorityDirectory
from .models import Authority

_ALL_CATEGORIES = [
    "pothole",
    "garbage",
    "streetlight",
    "drainage",
    "water_supply",
    "sewage",
    "traffic_signal",
    "encroachment",
    "stray_animals",
    "parks",
    "other",
]

SEED_AUTHORITIES: List[Dict[str, Any]] = [
    # Bangalore
    {
        "id": "bbmp",
        "name": "BBMP (Bruhat Bengaluru Mahanagara Palike)",
        "nameLocal": "ಬೃಹತ್ ಬೆಂಗಳೂರು ಮಹಾನಗರ ಪಾಲಿಕೆ",
        "handle": "@BBMPCOMM",
        "jurisdictionType": "city",
        "state": "Karnataka",
        "city": "Bangalore",
        "geohashPrefixes": ["tdr1"],
        "issueCategories": [
            "pothole",
            "garbage",
            "streetlight",
            "drainage",
            "water_supply",
            "sewage",
            "parks",
            "other",
        ],
        "priorityTier": 1,
        "contact": {
            "website": "https://bbmp.gov.in",
            "phone": "080-22660000",
            "tollFree": "1800-425-2368",
            "email": "commissioner@bbmp.gov.in",
            "whatsapp": "+918022660000",
        },
    },
    {
        "id": "blr_traffic_police",
        "name": "Bangalore Traffic Police",
        "handle": "@BlrCityTraffic",
        "jurisdictionType": "department",
        "state": "Karnataka",
        "city": "Bangalore",
        "geohashPrefixes": ["tdr1"],
        "issueCategories": ["traffic_signal", "pothole", "encroachment"],
        "priorityTier": 1,
        "contact": {
            "phone": "080-22868550",
            "tollFree": "103",
            "website": "https://traffic.karnataka.gov.in",
            "email": "blrtrafficpol@gmail.com",
            "whatsapp": "+918022868550",
        },
    },
    {
        "id": "bwssb",
        "name": "BWSSB (Bangalore Water Supply)",
        "handle": "@BWSSB_Official",
        "jurisdictionType": "department",
        "state": "Karnataka",
        "city": "Bangalore",
        "geohashPrefixes": ["tdr1"],
        "issueCategories": ["water_supply", "sewage"],
        "priorityTier": 1,
        "contact": {"whatsapp": "+918025533555"},
    },
    # Mumbai
    {
        "id": "bmc",
        "name": "BMC (Brihanmumbai Municipal Corporation)",
        "nameLocal": "बृहन्मुंबई महानगरपालिका",
        "handle": "@mybmc",
        "jurisdictionType": "city",
        "state": "Maharashtra",
        "city": "Mumbai",
        "geohashPrefixes": ["te7p"],
        "issueCategories": [
            "pothole",
            "garbage",
            "streetlight",
            "drainage",
            "sewage",
            "parks",
            "encroachment",
            "other",
        ],
        "priorityTier": 1,
        "contact": {"website": "https://portal.mcgm.gov.in", "phone": "1916"},
    },
    {
        "id": "mumbai_traffic_police",
        "name": "Mumbai Traffic Police",
        "handle": "@MTPHereToHelp",
        "jurisdictionType": "department",
        "state": "Maharashtra",
        "city": "Mumbai",
        "geohashPrefixes": ["te7p"],
        "issueCategories": ["traffic_signal", "pothole", "encroachment"],
        "priorityTier": 1,
    },
    # Kalyan
    {
        "id": "kdmc",
        "name": "Kalyan Dombivli Municipal Corporation",
        "nameLocal": "कल्याण डोंबिवली महानगरपालिका",
        "handle": "@kdmc_kalyan",
        "jurisdictionType": "city",
        "state": "Maharashtra",
        "city": "Kalyan",
        "geohashPrefixes": ["te7q"],
        "issueCategories": [
            "pothole",
            "garbage",
            "streetlight",
            "drainage",
            "water_supply",
            "sewage",
            "parks",
            "stray_animals",
            "other",
        ],
        "priorityTier": 1,
        "contact": {"website": "https://kdmc.gov.in", "phone": "0251-2200505"},
    },
    {
        "id": "kalyan_police",
        "name": "Thane Police (Kalyan Division)",
        "handle": "@KalyanPolice",
        "jurisdictionType": "department",
        "state": "Maharashtra",
        "city": "Kalyan",
        "geohashPrefixes": ["te7q"],
        "issueCategories": ["traffic_signal", "encroachment"],
        "priorityTier": 2,
    },
    # Delhi
    {
        "id": "mcd",
        "name": "MCD (Municipal Corporation of Delhi)",
        "handle": "@MCD_Delhi",
        "jurisdictionType": "city",
        "state": "Delhi",
        "city": "Delhi",
        "geohashPrefixes": ["ttnr"],
        "issueCategories": [
            "pothole",
            "garbage",
            "streetlight",
            "drainage",
            "parks",
            "stray_animals",
            "other",
        ],
        "priorityTier": 1,
        "contact": {"website": "https://mcdonline.nic.in", "phone": "1800-11-6688"},
    },
    {
        "id": "delhi_traffic_police",
        "name": "Delhi Traffic Police",
        "handle": "@dtptraffic",
        "jurisdictionType": "department",
        "state": "Delhi",
        "city": "Delhi",
        "geohashPrefixes": ["ttnr"],
        "issueCategories": ["traffic_signal", "pothole", "encroachment"],
        "priorityTier": 1,
    },
    {
        "id": "delhi_jal_board",
        "name": "Delhi Jal Board",
        "handle": "@DelhiJalBoard",
        "jurisdictionType": "department",
        "state": "Delhi",
        "city": "Delhi",
        "geohashPrefixes": ["ttnr"],
        "issueCategories": ["water_supply", "sewage"],
        "priorityTier": 1,
    },
    # Chennai
    {
        "id": "chennai_corp",
        "name": "Greater Chennai Corporation",
        "nameLocal": "பெரும் சென்னை மாநகராட்சி",
        "handle": "@chennaicorp",
        "jurisdictionType": "city",
        "state": "Tamil Nadu",
        "city": "Chennai",
        "geohashPrefixes": ["tfh3"],
        "issueCategories": [
            "pothole",
            "garbage",
            "streetlight",
            "drainage",
            "water_supply",
            "sewage",
            "parks",
            "other",
        ],
        "priorityTier": 1,
        "contact": {
            "website": "https://chennaicorporation.gov.in",
            "phone": "044-25619200",
        },
    },
    {
        "id": "chennai_traffic_police",
        "name": "Chennai Traffic Police",
        "handle": "@ChennaiTPNews",
        "jurisdictionType": "department",
        "state": "Tamil Nadu",
        "city": "Chennai",
        "geohashPrefixes": ["tfh3"],
        "issueCategories": ["traffic_signal", "pothole"],
        "priorityTier": 1,
    },
    # Hyderabad
    {
        "id": "ghmc",
        "name": "GHMC (Greater Hyderabad Municipal Corporation)",
        "nameLocal": "గ్రేటర్ హైదరాబాద్ మునిసిపల్ కార్పొరేషన్",
        "handle": "@GHMCOnline",
        "jurisdictionType": "city",
        "state": "Telangana",
        "city": "Hyderabad",
        "geohashPrefixes": ["tep8"],
        "issueCategories": [
            "pothole",
            "garbage",
            "streetlight",
            "drainage",
            "water_supply",
            "sewage",
            "parks",
            "other",
        ],
        "priorityTier": 1,
        "contact": {"website": "https://ghmc.gov.in", "phone": "040-21111111"},
    },
    {
        "id": "hyderabad_traffic_police",
        "name": "Hyderabad Traffic Police",
        "handle": "@HYDTP",
        "jurisdictionType": "department",
        "state": "Telangana",
        "city": "Hyderabad",
        "geohashPrefixes": ["tep8"],
        "issueCategories": ["traffic_signal", "pothole", "encroachment"],
        "priorityTier": 1,
    },
    # National fallback
    {
        "id": "mygov_india",
        "name": "MyGov India",
        "handle": "@mygovindia",
        "jurisdictionType": "national",
        "geohashPrefixes": [],
        "issueCategories": _ALL_CATEGORIES,
        "priorityTier": 3,
        "contact": {"website": "https://www.mygov.in"},
    },
]


def seed_authorities() -> List[Authority]:
    return [Authority.model_validate(item) for item in SEED_AUTHORITIES]


def seed_directory() -> StaticAuthorityDirectory:
    return StaticAuthorityDirectory(seed_authorities())
