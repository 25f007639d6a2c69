"""Word lists and value tables that the generators draw from."""

from __future__ import annotations

from collections.abc import Mapping

BEER: Mapping[str, tuple[str, ...]] = {
    "name": (
        "Pliny The Elder", "Founders Kentucky Breakfast", "Trappistes Rochefort 10",
        "HopSlam Ale", "Stone Imperial Russian Stout", "St. Bernardus Abt 12",
        "Founders Breakfast Stout", "Weihenstephaner Hefeweissbier", "Péché Mortel",
        "Celebrator Doppelbock", "Duvel", "Dreadnaught IPA", "Nugget Nectar",
        "La Fin Du Monde", "Bourbon County Stout", "Old Rasputin Russian Imperial Stout",
        "Two Hearted Ale", "Ruination IPA", "Schneider Aventinus", "Double Bastard Ale",
        "90 Minute IPA", "Hop Rod Rye", "Trappistes Rochefort 8", "Chimay Grande Réserve",
        "Stone IPA", "Arrogant Bastard Ale", "Edmund Fitzgerald Porter", "Chocolate St",
        "Oak Aged Yeti Imperial Stout", "Ten FIDY", "Storm King Stout",
        "Shakespeare Oatmeal", "Alpha King Pale Ale", "Westmalle Trappist Tripel",
        "Samuel Smith’s Imperial IPA", "Yeti Imperial Stout", "Hennepin",
        "Samuel Smith’s Oatmeal Stout", "Brooklyn Black", "Oaked Arrogant Bastard Ale",
        "Sublimely Self-Righteous Ale", "Trois Pistoles", "Bell’s Expedition",
        "Sierra Nevada Celebration Ale", "Sierra Nevada Bigfoot Barleywine Style Ale",
        "Racer 5 India Pale Ale, Bear Republic Bre", "Orval Trappist Ale",
        "Hercules Double IPA", "Maharaj", "Maudite",
    ),
    "hop": (
        "Ahtanum", "Amarillo", "Bitter Gold", "Bravo", "Brewer’s Gold", "Bullion",
        "Cascade", "Cashmere", "Centennial", "Chelan", "Chinook", "Citra", "Cluster",
        "Columbia", "Columbus", "Comet", "Crystal", "Equinox", "Eroica", "Fuggle",
        "Galena", "Glacier", "Golding", "Hallertau", "Horizon", "Liberty", "Magnum",
        "Millennium", "Mosaic", "Mt. Hood", "Mt. Rainier", "Newport", "Northern Brewer",
        "Nugget", "Olympic", "Palisade", "Perle", "Saaz", "Santiam", "Simcoe",
        "Sorachi Ace", "Sterling", "Summit", "Tahoma", "Tettnang", "TriplePearl",
        "Ultra", "Vanguard", "Warrior", "Willamette", "Yakima Gol",
    ),
    "yeast": (
        "1007 - German Ale", "1010 - American Wheat", "1028 - London Ale",
        "1056 - American Ale", "1084 - Irish Ale", "1098 - British Ale",
        "1099 - Whitbread Ale", "1187 - Ringwood Ale", "1272 - American Ale II",
        "1275 - Thames Valley Ale", "1318 - London Ale III", "1332 - Northwest Ale",
        "1335 - British Ale II", "1450 - Dennys Favorite 50", "1469 - West Yorkshire Ale",
        "1728 - Scottish Ale", "1968 - London ESB Ale", "2565 - Kölsch",
        "1214 - Belgian Abbey", "1388 - Belgian Strong Ale", "1762 - Belgian Abbey II",
        "3056 - Bavarian Wheat Blend", "3068 - Weihenstephan Weizen",
        "3278 - Belgian Lambic Blend", "3333 - German Wheat", "3463 - Forbidden Fruit",
        "3522 - Belgian Ardennes", "3638 - Bavarian Wheat", "3711 - French Saison",
        "3724 - Belgian Saison", "3763 - Roeselare Ale Blend",
        "3787 - Trappist High Gravity", "3942 - Belgian Wheat", "3944 - Belgian Witbier",
        "2000 - Budvar Lager", "2001 - Urquell Lager", "2007 - Pilsen Lager",
        "2035 - American Lager", "2042 - Danish Lager", "2112 - California Lager",
        "2124 - Bohemian Lager", "2206 - Bavarian Lager", "2278 - Czech Pils",
        "2308 - Munich Lager", "2633 - Octoberfest Lager Blend",
        "5112 - Brettanomyces bruxellensis", "5335 - Lactobacillus",
        "5526 - Brettanomyces lambicus", "5733 - Pediococcus",
    ),
    "malt": (
        "Black malt", "Caramel", "Carapils", "Chocolate", "Munich", "Caramel",
        "Carapils", "Chocolate malt", "Munich", "Pale", "Roasted barley", "Rye malt",
        "Special roast", "Victory", "Vienna", "Wheat mal",
    ),
    "style": (
        "Light Lager", "Pilsner", "European Amber Lager", "Dark Lager", "Bock",
        "Light Hybrid Beer", "Amber Hybrid Beer", "English Pale Ale",
        "Scottish And Irish Ale", "Merican Ale", "English Brown Ale", "Porter", "Stout",
        "India Pale Ale", "German Wheat And Rye Beer", "Belgian And French Ale",
        "Sour Ale", "Belgian Strong Ale", "Strong Ale", "Fruit Beer", "Vegetable Beer",
        "Smoke-flavored", "Wood-aged Beer",
    ),
}

COLORS: Mapping[str, tuple[str, ...]] = {
    "safe": (
        "black", "maroon", "green", "navy", "olive", "purple", "teal", "lime", "blue",
        "silver", "gray", "yellow", "fuchsia", "aqua", "white",
    ),
    "full": (
        "AliceBlue", "AntiqueWhite", "Aqua", "Aquamarine", "Azure", "Beige", "Bisque",
        "Black", "BlanchedAlmond", "Blue", "BlueViolet", "Brown", "BurlyWood",
        "CadetBlue", "Chartreuse", "Chocolate", "Coral", "CornflowerBlue", "Cornsilk",
        "Crimson", "Cyan", "DarkBlue", "DarkCyan", "DarkGoldenRod", "DarkGray",
        "DarkGreen", "DarkKhaki", "DarkMagenta", "DarkOliveGreen", "Darkorange",
        "DarkOrchid", "DarkRed", "DarkSalmon", "DarkSeaGreen", "DarkSlateBlue",
        "DarkSlateGray", "DarkTurquoise", "DarkViolet", "DeepPink", "DeepSkyBlue",
        "DimGray", "DimGrey", "DodgerBlue", "FireBrick", "FloralWhite", "ForestGreen",
        "Fuchsia", "Gainsboro", "GhostWhite", "Gold", "GoldenRod", "Gray", "Green",
        "GreenYellow", "HoneyDew", "HotPink", "IndianRed ", "Indigo ", "Ivory", "Khaki",
        "Lavender", "LavenderBlush", "LawnGreen", "LemonChiffon", "LightBlue",
        "LightCoral", "LightCyan", "LightGoldenRodYellow", "LightGray", "LightGreen",
        "LightPink", "LightSalmon", "LightSeaGreen", "LightSkyBlue", "LightSlateGray",
        "LightSteelBlue", "LightYellow", "Lime", "LimeGreen", "Linen", "Magenta",
        "Maroon", "MediumAquaMarine", "MediumBlue", "MediumOrchid", "MediumPurple",
        "MediumSeaGreen", "MediumSlateBlue", "MediumSpringGreen", "MediumTurquoise",
        "MediumVioletRed", "MidnightBlue", "MintCream", "MistyRose", "Moccasin",
        "NavajoWhite", "Navy", "OldLace", "Olive", "OliveDrab", "Orange", "OrangeRed",
        "Orchid", "PaleGoldenRod", "PaleGreen", "PaleTurquoise", "PaleVioletRed",
        "PapayaWhip", "PeachPuff", "Peru", "Pink", "Plum", "PowderBlue", "Purple", "Red",
        "RosyBrown", "RoyalBlue", "SaddleBrown", "Salmon", "SandyBrown", "SeaGreen",
        "SeaShell", "Sienna", "Silver", "SkyBlue", "SlateBlue", "SlateGray", "Snow",
        "SpringGreen", "SteelBlue", "Tan", "Teal", "Thistle", "Tomato", "Turquoise",
        "Violet", "Wheat", "White", "WhiteSmoke", "Yellow", "YellowGreen",
    ),
}

COMPUTER: Mapping[str, tuple[str, ...]] = {
    "linux_processor": ("i686", "x86_64"),
    "mac_processor": ("Intel", "PPC", "U; Intel", "U; PPC"),
    "windows_platform": (
        "Windows NT 6.2", "Windows NT 6.1", "Windows NT 6.0", "Windows NT 5.2",
        "Windows NT 5.1", "Windows NT 5.01", "Windows NT 5.0", "Windows NT 4.0",
        "Windows 98; Win 9x 4.90", "Windows 98", "Windows 95", "Windows CE",
    ),
}

CONTACT: Mapping[str, tuple[str, ...]] = {
    "phone": ("###-###-####", "(###)###-####", "1-###-###-####", "###.###.####"),
}

HACKER: Mapping[str, tuple[str, ...]] = {
    "abbreviation": (
        "TCP", "HTTP", "SDD", "RAM", "GB", "CSS", "SSL", "AGP", "SQL", "FTP", "PCI",
        "AI", "ADP", "RSS", "XML", "EXE", "COM", "HDD", "THX", "SMTP", "SMS", "USB",
        "PNG", "SAS", "IB", "SCSI", "JSON", "XSS", "JBOD",
    ),
    "adjective": (
        "auxiliary", "primary", "back-end", "digital", "open-source", "virtual",
        "cross-platform", "redundant", "online", "haptic", "multi-byte", "bluetooth",
        "wireless", "1080p", "neural", "optical", "solid state", "mobile",
    ),
    "noun": (
        "driver", "protocol", "bandwidth", "panel", "microchip", "program", "port",
        "card", "array", "interface", "system", "sensor", "firewall", "hard drive",
        "pixel", "alarm", "feed", "monitor", "application", "transmitter", "bus",
        "circuit", "capacitor", "matrix",
    ),
    "verb": (
        "back up", "bypass", "hack", "override", "compress", "copy", "navigate",
        "index", "connect", "generate", "quantify", "calculate", "synthesize", "input",
        "transmit", "program", "reboot", "parse",
    ),
    "ingverb": (
        "backing up", "bypassing", "hacking", "overriding", "compressing", "copying",
        "navigating", "indexing", "connecting", "generating", "quantifying",
        "calculating", "synthesizing", "transmitting", "programming", "parsing",
    ),
    "phrase": (
        "If we {hacker.verb} the {hacker.noun}, we can get to the {hacker.abbreviation}"
        " {hacker.noun} through the {hacker.adjective} {hacker.abbreviation} {hacker.noun}!",
        "We need to {hacker.verb} the {hacker.adjective} {hacker.abbreviation} {hacker.noun}!",
        "Try to {hacker.verb} the {hacker.abbreviation} {hacker.noun}, maybe it will"
        " {hacker.verb} the {hacker.adjective} {hacker.noun}!",
        "You can't {hacker.verb} the {hacker.noun} without {hacker.ingverb} the"
        " {hacker.adjective} {hacker.abbreviation} {hacker.noun}!",
        "Use the {hacker.adjective} {hacker.abbreviation} {hacker.noun}, then you can"
        " {hacker.verb} the {hacker.adjective} {hacker.noun}!",
        "The {hacker.abbreviation} {hacker.noun} is down, {hacker.verb} the"
        " {hacker.adjective} {hacker.noun} so we can {hacker.verb} the"
        " {hacker.abbreviation} {hacker.noun}!",
        "{hacker.ingverb} the {hacker.noun} won't do anything, we need to {hacker.verb}"
        " the {hacker.adjective} {hacker.abbreviation} {hacker.noun}!",
        "I'll {hacker.verb} the {hacker.adjective} {hacker.abbreviation} {hacker.noun},"
        " that should {hacker.verb} the {hacker.abbreviation} {hacker.noun}!",
    ),
}

INTERNET: Mapping[str, tuple[str, ...]] = {
    "browser": ("firefox", "chrome", "internetExplorer", "opera", "safari"),
    "domain_suffix": ("com", "biz", "info", "name", "net", "org", "io"),
    "http_method": ("HEAD", "GET", "POST", "PUT", "PATCH", "DELETE"),
}

JOB: Mapping[str, tuple[str, ...]] = {
    "title": (
        "Administrator", "Agent", "Analyst", "Architect", "Assistant", "Associate",
        "Consultant", "Coordinator", "Designer", "Developer", "Director", "Engineer",
        "Executive", "Facilitator", "Liaison", "Manager", "Officer", "Orchestrator",
        "Planner", "Producer", "Representative", "Specialist", "Strategist",
        "Supervisor", "Technician",
    ),
    "descriptor": (
        "Central", "Chief", "Corporate", "Customer", "Direct", "District", "Dynamic",
        "Dynamic", "Forward", "Future", "Global", "Human", "Internal", "International",
        "Investor", "Lead", "Legacy", "National", "Principal", "Product", "Regional",
        "Senior",
    ),
    "level": (
        "Accountability", "Accounts", "Applications", "Assurance", "Brand", "Branding",
        "Communications", "Configuration", "Creative", "Data", "Directives", "Division",
        "Factors", "Functionality", "Group", "Identity", "Implementation",
        "Infrastructure", "Integration", "Interactions", "Intranet", "Marketing",
        "Markets", "Metrics", "Mobility", "Operations", "Optimization", "Paradigm",
        "Program", "Quality", "Research", "Response", "Security", "Solutions",
        "Tactics", "Usability", "Web",
    ),
}

LOG_LEVELS: Mapping[str, tuple[str, ...]] = {
    "general": ("error", "warning", "info", "fatal", "trace", "debug"),
    "syslog": ("emerg", "alert", "crit", "err", "warning", "notice", "info", "debug"),
    "apache": (
        "emerg", "alert", "crit", "error", "warn", "notice", "info", "debug", "trace1-8",
    ),
}

PAYMENT: Mapping[str, tuple[str, ...]] = {
    "card_type": ("Visa", "MasterCard", "American Express", "Discover"),
    "number": (
        # Visa
        "4###############",
        "4###############",
        # Mastercard
        "222100##########",
        "272099##########",
        # American Express
        "34#############",
        "37#############",
        # Discover
        "65##############",
        "65##############",
    ),
}

STATUS_CODES: Mapping[str, tuple[int, ...]] = {
    "simple": (200, 301, 302, 400, 404, 500),
    "general": (
        100, 200, 201, 203, 204, 205, 301, 302, 304, 400, 401, 403, 404, 405, 406,
        416, 500, 501, 502, 503, 504,
    ),
}

DATA: Mapping[str, Mapping[str, tuple[str, ...]]] = {
    "contact": CONTACT,
    "job": JOB,
    "internet": INTERNET,
    "color": COLORS,
    "computer": COMPUTER,
    "payment": PAYMENT,
    "beer": BEER,
    "hacker": HACKER,
    "log_level": LOG_LEVELS,
}

INT_DATA: Mapping[str, Mapping[str, tuple[int, ...]]] = {
    "status_code": STATUS_CODES,
}


def has_values(category: str, subcategory: str) -> bool:
    """Return True if the string tables hold category.subcategory."""
    return subcategory in DATA.get(category, {})


def has_int_values(category: str, subcategory: str) -> bool:
    """Return True if the integer tables hold category.subcategory."""
    return subcategory in INT_DATA.get(category, {})