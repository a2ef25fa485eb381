# Windows timezone names mapped to IANA zones, from the CLDR windowsZones
# supplemental data, one entry per mapZone row. Plain names map to the zone of
# the "001" (default) territory; "<name>/<territory>" keys list every zone of
# that territory, "ZZ" being the territory of the fixed-offset Etc zones.

WINDOWS_ZONES: dict[str, tuple[str, ...]] = {
    # (UTC-12:00) International Date Line West
    "Dateline Standard Time": ("Etc/GMT+12",),
    "Dateline Standard Time/ZZ": ("Etc/GMT+12",),
    # (UTC-11:00) Coordinated Universal Time-11
    "UTC-11": ("Etc/GMT+11",),
    "UTC-11/AS": ("Pacific/Pago_Pago",),
    "UTC-11/NU": ("Pacific/Niue",),
    "UTC-11/UM": ("Pacific/Midway",),
    "UTC-11/ZZ": ("Etc/GMT+11",),
    # (UTC-10:00) Aleutian Islands
    "Aleutian Standard Time": ("America/Adak",),
    "Aleutian Standard Time/US": ("America/Adak",),
    # (UTC-10:00) Hawaii
    "Hawaiian Standard Time": ("Pacific/Honolulu",),
    "Hawaiian Standard Time/CK": ("Pacific/Rarotonga",),
    "Hawaiian Standard Time/PF": ("Pacific/Tahiti",),
    "Hawaiian Standard Time/US": ("Pacific/Honolulu",),
    "Hawaiian Standard Time/ZZ": ("Etc/GMT+10",),
    # (UTC-09:30) Marquesas Islands
    "Marquesas Standard Time": ("Pacific/Marquesas",),
    "Marquesas Standard Time/PF": ("Pacific/Marquesas",),
    # (UTC-09:00) Alaska
    "Alaskan Standard Time": ("America/Anchorage",),
    "Alaskan Standard Time/US": (
        "America/Anchorage",
        "America/Juneau",
        "America/Metlakatla",
        "America/Nome",
        "America/Sitka",
        "America/Yakutat",
    ),
    # (UTC-09:00) Coordinated Universal Time-09
    "UTC-09": ("Etc/GMT+9",),
    "UTC-09/PF": ("Pacific/Gambier",),
    "UTC-09/ZZ": ("Etc/GMT+9",),
    # (UTC-08:00) Baja California
    "Pacific Standard Time (Mexico)": ("America/Tijuana",),
    "Pacific Standard Time (Mexico)/MX": ("America/Tijuana", "America/Santa_Isabel"),
    # (UTC-08:00) Coordinated Universal Time-08
    "UTC-08": ("Etc/GMT+8",),
    "UTC-08/PN": ("Pacific/Pitcairn",),
    "UTC-08/ZZ": ("Etc/GMT+8",),
    # (UTC-08:00) Pacific Time (US & Canada)
    "Pacific Standard Time": ("America/Los_Angeles",),
    "Pacific Standard Time/CA": ("America/Vancouver",),
    "Pacific Standard Time/US": ("America/Los_Angeles",),
    "Pacific Standard Time/ZZ": ("PST8PDT",),
    # (UTC-07:00) Arizona
    "US Mountain Standard Time": ("America/Phoenix",),
    "US Mountain Standard Time/CA": (
        "America/Creston",
        "America/Dawson_Creek",
        "America/Fort_Nelson",
    ),
    "US Mountain Standard Time/MX": ("America/Hermosillo",),
    "US Mountain Standard Time/US": ("America/Phoenix",),
    "US Mountain Standard Time/ZZ": ("Etc/GMT+7",),
    # (UTC-07:00) La Paz, Mazatlan
    "Mountain Standard Time (Mexico)": ("America/Mazatlan",),
    "Mountain Standard Time (Mexico)/MX": ("America/Mazatlan",),
    # (UTC-07:00) Mountain Time (US & Canada)
    "Mountain Standard Time": ("America/Denver",),
    "Mountain Standard Time/CA": (
        "America/Edmonton",
        "America/Cambridge_Bay",
        "America/Inuvik",
        "America/Yellowknife",
    ),
    "Mountain Standard Time/MX": ("America/Ciudad_Juarez",),
    "Mountain Standard Time/US": ("America/Denver", "America/Boise"),
    "Mountain Standard Time/ZZ": ("MST7MDT",),
    # (UTC-07:00) Yukon
    "Yukon Standard Time": ("America/Whitehorse",),
    "Yukon Standard Time/CA": ("America/Whitehorse", "America/Dawson"),
    # (UTC-06:00) Central America
    "Central America Standard Time": ("America/Guatemala",),
    "Central America Standard Time/BZ": ("America/Belize",),
    "Central America Standard Time/CR": ("America/Costa_Rica",),
    "Central America Standard Time/EC": ("Pacific/Galapagos",),
    "Central America Standard Time/GT": ("America/Guatemala",),
    "Central America Standard Time/HN": ("America/Tegucigalpa",),
    "Central America Standard Time/NI": ("America/Managua",),
    "Central America Standard Time/SV": ("America/El_Salvador",),
    "Central America Standard Time/ZZ": ("Etc/GMT+6",),
    # (UTC-06:00) Central Time (US & Canada)
    "Central Standard Time": ("America/Chicago",),
    "Central Standard Time/CA": (
        "America/Winnipeg",
        "America/Rainy_River",
        "America/Rankin_Inlet",
        "America/Resolute",
    ),
    "Central Standard Time/MX": ("America/Matamoros", "America/Ojinaga"),
    "Central Standard Time/US": (
        "America/Chicago",
        "America/Indiana/Knox",
        "America/Indiana/Tell_City",
        "America/Menominee",
        "America/North_Dakota/Beulah",
        "America/North_Dakota/Center",
        "America/North_Dakota/New_Salem",
    ),
    "Central Standard Time/ZZ": ("CST6CDT",),
    # (UTC-06:00) Easter Island
    "Easter Island Standard Time": ("Pacific/Easter",),
    "Easter Island Standard Time/CL": ("Pacific/Easter",),
    # (UTC-06:00) Guadalajara, Mexico City, Monterrey
    "Central Standard Time (Mexico)": ("America/Mexico_City",),
    "Central Standard Time (Mexico)/MX": (
        "America/Mexico_City",
        "America/Bahia_Banderas",
        "America/Merida",
        "America/Monterrey",
        "America/Chihuahua",
    ),
    # (UTC-06:00) Saskatchewan
    "Canada Central Standard Time": ("America/Regina",),
    "Canada Central Standard Time/CA": ("America/Regina", "America/Swift_Current"),
    # (UTC-05:00) Bogota, Lima, Quito, Rio Branco
    "SA Pacific Standard Time": ("America/Bogota",),
    "SA Pacific Standard Time/BR": ("America/Rio_Branco", "America/Eirunepe"),
    "SA Pacific Standard Time/CA": ("America/Coral_Harbour",),
    "SA Pacific Standard Time/CO": ("America/Bogota",),
    "SA Pacific Standard Time/EC": ("America/Guayaquil",),
    "SA Pacific Standard Time/JM": ("America/Jamaica",),
    "SA Pacific Standard Time/KY": ("America/Cayman",),
    "SA Pacific Standard Time/PA": ("America/Panama",),
    "SA Pacific Standard Time/PE": ("America/Lima",),
    "SA Pacific Standard Time/ZZ": ("Etc/GMT+5",),
    # (UTC-05:00) Chetumal
    "Eastern Standard Time (Mexico)": ("America/Cancun",),
    "Eastern Standard Time (Mexico)/MX": ("America/Cancun",),
    # (UTC-05:00) Eastern Time (US & Canada)
    "Eastern Standard Time": ("America/New_York",),
    "Eastern Standard Time/BS": ("America/Nassau",),
    "Eastern Standard Time/CA": (
        "America/Toronto",
        "America/Iqaluit",
        "America/Montreal",
        "America/Nipigon",
        "America/Pangnirtung",
        "America/Thunder_Bay",
    ),
    "Eastern Standard Time/US": (
        "America/New_York",
        "America/Detroit",
        "America/Indiana/Petersburg",
        "America/Indiana/Vincennes",
        "America/Indiana/Winamac",
        "America/Kentucky/Monticello",
        "America/Louisville",
    ),
    "Eastern Standard Time/ZZ": ("EST5EDT",),
    # (UTC-05:00) Haiti
    "Haiti Standard Time": ("America/Port-au-Prince",),
    "Haiti Standard Time/HT": ("America/Port-au-Prince",),
    # (UTC-05:00) Havana
    "Cuba Standard Time": ("America/Havana",),
    "Cuba Standard Time/CU": ("America/Havana",),
    # (UTC-05:00) Indiana (East)
    "US Eastern Standard Time": ("America/Indianapolis",),
    "US Eastern Standard Time/US": (
        "America/Indianapolis",
        "America/Indiana/Marengo",
        "America/Indiana/Vevay",
    ),
    # (UTC-05:00) Turks and Caicos
    "Turks And Caicos Standard Time": ("America/Grand_Turk",),
    "Turks And Caicos Standard Time/TC": ("America/Grand_Turk",),
    # (UTC-04:00) Asuncion
    "Paraguay Standard Time": ("America/Asuncion",),
    "Paraguay Standard Time/PY": ("America/Asuncion",),
    # (UTC-04:00) Atlantic Time (Canada)
    "Atlantic Standard Time": ("America/Halifax",),
    "Atlantic Standard Time/BM": ("Atlantic/Bermuda",),
    "Atlantic Standard Time/CA": (
        "America/Halifax",
        "America/Glace_Bay",
        "America/Goose_Bay",
        "America/Moncton",
    ),
    "Atlantic Standard Time/GL": ("America/Thule",),
    # (UTC-04:00) Caracas
    "Venezuela Standard Time": ("America/Caracas",),
    "Venezuela Standard Time/VE": ("America/Caracas",),
    # (UTC-04:00) Cuiaba
    "Central Brazilian Standard Time": ("America/Cuiaba",),
    "Central Brazilian Standard Time/BR": ("America/Cuiaba", "America/Campo_Grande"),
    # (UTC-04:00) Georgetown, La Paz, Manaus, San Juan
    "SA Western Standard Time": ("America/La_Paz",),
    "SA Western Standard Time/AG": ("America/Antigua",),
    "SA Western Standard Time/AI": ("America/Anguilla",),
    "SA Western Standard Time/AW": ("America/Aruba",),
    "SA Western Standard Time/BB": ("America/Barbados",),
    "SA Western Standard Time/BL": ("America/St_Barthelemy",),
    "SA Western Standard Time/BO": ("America/La_Paz",),
    "SA Western Standard Time/BQ": ("America/Kralendijk",),
    "SA Western Standard Time/BR": (
        "America/Manaus",
        "America/Boa_Vista",
        "America/Porto_Velho",
    ),
    "SA Western Standard Time/CA": ("America/Blanc-Sablon",),
    "SA Western Standard Time/CW": ("America/Curacao",),
    "SA Western Standard Time/DM": ("America/Dominica",),
    "SA Western Standard Time/DO": ("America/Santo_Domingo",),
    "SA Western Standard Time/GD": ("America/Grenada",),
    "SA Western Standard Time/GP": ("America/Guadeloupe",),
    "SA Western Standard Time/GY": ("America/Guyana",),
    "SA Western Standard Time/KN": ("America/St_Kitts",),
    "SA Western Standard Time/LC": ("America/St_Lucia",),
    "SA Western Standard Time/MF": ("America/Marigot",),
    "SA Western Standard Time/MQ": ("America/Martinique",),
    "SA Western Standard Time/MS": ("America/Montserrat",),
    "SA Western Standard Time/PR": ("America/Puerto_Rico",),
    "SA Western Standard Time/SX": ("America/Lower_Princes",),
    "SA Western Standard Time/TT": ("America/Port_of_Spain",),
    "SA Western Standard Time/VC": ("America/St_Vincent",),
    "SA Western Standard Time/VG": ("America/Tortola",),
    "SA Western Standard Time/VI": ("America/St_Thomas",),
    "SA Western Standard Time/ZZ": ("Etc/GMT+4",),
    # (UTC-04:00) Santiago
    "Pacific SA Standard Time": ("America/Santiago",),
    "Pacific SA Standard Time/CL": ("America/Santiago",),
    # (UTC-03:30) Newfoundland
    "Newfoundland Standard Time": ("America/St_Johns",),
    "Newfoundland Standard Time/CA": ("America/St_Johns",),
    # (UTC-03:00) Araguaina
    "Tocantins Standard Time": ("America/Araguaina",),
    "Tocantins Standard Time/BR": ("America/Araguaina",),
    # (UTC-03:00) Brasilia
    "E. South America Standard Time": ("America/Sao_Paulo",),
    "E. South America Standard Time/BR": ("America/Sao_Paulo",),
    # (UTC-03:00) Cayenne, Fortaleza
    "SA Eastern Standard Time": ("America/Cayenne",),
    "SA Eastern Standard Time/AQ": ("Antarctica/Rothera", "Antarctica/Palmer"),
    "SA Eastern Standard Time/BR": (
        "America/Fortaleza",
        "America/Belem",
        "America/Maceio",
        "America/Recife",
        "America/Santarem",
    ),
    "SA Eastern Standard Time/FK": ("Atlantic/Stanley",),
    "SA Eastern Standard Time/GF": ("America/Cayenne",),
    "SA Eastern Standard Time/SR": ("America/Paramaribo",),
    "SA Eastern Standard Time/ZZ": ("Etc/GMT+3",),
    # (UTC-03:00) City of Buenos Aires
    "Argentina Standard Time": ("America/Buenos_Aires",),
    "Argentina Standard Time/AR": (
        "America/Buenos_Aires",
        "America/Argentina/La_Rioja",
        "America/Argentina/Rio_Gallegos",
        "America/Argentina/Salta",
        "America/Argentina/San_Juan",
        "America/Argentina/San_Luis",
        "America/Argentina/Tucuman",
        "America/Argentina/Ushuaia",
        "America/Catamarca",
        "America/Cordoba",
        "America/Jujuy",
        "America/Mendoza",
    ),
    # (UTC-03:00) Greenland
    "Greenland Standard Time": ("America/Godthab",),
    "Greenland Standard Time/GL": ("America/Godthab",),
    # (UTC-03:00) Montevideo
    "Montevideo Standard Time": ("America/Montevideo",),
    "Montevideo Standard Time/UY": ("America/Montevideo",),
    # (UTC-03:00) Punta Arenas
    "Magallanes Standard Time": ("America/Punta_Arenas",),
    "Magallanes Standard Time/CL": ("America/Punta_Arenas",),
    # (UTC-03:00) Saint Pierre and Miquelon
    "Saint Pierre Standard Time": ("America/Miquelon",),
    "Saint Pierre Standard Time/PM": ("America/Miquelon",),
    # (UTC-03:00) Salvador
    "Bahia Standard Time": ("America/Bahia",),
    "Bahia Standard Time/BR": ("America/Bahia",),
    # (UTC-02:00) Coordinated Universal Time-02
    "UTC-02": ("Etc/GMT+2",),
    "UTC-02/BR": ("America/Noronha",),
    "UTC-02/GS": ("Atlantic/South_Georgia",),
    "UTC-02/ZZ": ("Etc/GMT+2",),
    # (UTC-01:00) Azores
    "Azores Standard Time": ("Atlantic/Azores",),
    "Azores Standard Time/GL": ("America/Scoresbysund",),
    "Azores Standard Time/PT": ("Atlantic/Azores",),
    # (UTC-01:00) Cabo Verde Is.
    "Cape Verde Standard Time": ("Atlantic/Cape_Verde",),
    "Cape Verde Standard Time/CV": ("Atlantic/Cape_Verde",),
    "Cape Verde Standard Time/ZZ": ("Etc/GMT+1",),
    # (UTC) Coordinated Universal Time
    "UTC": ("Etc/UTC",),
    "UTC/ZZ": ("Etc/UTC", "Etc/GMT"),
    # (UTC+00:00) Dublin, Edinburgh, Lisbon, London
    "GMT Standard Time": ("Europe/London",),
    "GMT Standard Time/ES": ("Atlantic/Canary",),
    "GMT Standard Time/FO": ("Atlantic/Faeroe",),
    "GMT Standard Time/GB": ("Europe/London",),
    "GMT Standard Time/GG": ("Europe/Guernsey",),
    "GMT Standard Time/IE": ("Europe/Dublin",),
    "GMT Standard Time/IM": ("Europe/Isle_of_Man",),
    "GMT Standard Time/JE": ("Europe/Jersey",),
    "GMT Standard Time/PT": ("Europe/Lisbon", "Atlantic/Madeira"),
    # (UTC+00:00) Monrovia, Reykjavik
    "Greenwich Standard Time": ("Atlantic/Reykjavik",),
    "Greenwich Standard Time/BF": ("Africa/Ouagadougou",),
    "Greenwich Standard Time/CI": ("Africa/Abidjan",),
    "Greenwich Standard Time/GH": ("Africa/Accra",),
    "Greenwich Standard Time/GL": ("America/Danmarkshavn",),
    "Greenwich Standard Time/GM": ("Africa/Banjul",),
    "Greenwich Standard Time/GN": ("Africa/Conakry",),
    "Greenwich Standard Time/GW": ("Africa/Bissau",),
    "Greenwich Standard Time/IS": ("Atlantic/Reykjavik",),
    "Greenwich Standard Time/LR": ("Africa/Monrovia",),
    "Greenwich Standard Time/ML": ("Africa/Bamako",),
    "Greenwich Standard Time/MR": ("Africa/Nouakchott",),
    "Greenwich Standard Time/SH": ("Atlantic/St_Helena",),
    "Greenwich Standard Time/SL": ("Africa/Freetown",),
    "Greenwich Standard Time/SN": ("Africa/Dakar",),
    "Greenwich Standard Time/TG": ("Africa/Lome",),
    # (UTC+00:00) Sao Tome
    "Sao Tome Standard Time": ("Africa/Sao_Tome",),
    "Sao Tome Standard Time/ST": ("Africa/Sao_Tome",),
    # (UTC+01:00) Casablanca
    "Morocco Standard Time": ("Africa/Casablanca",),
    "Morocco Standard Time/EH": ("Africa/El_Aaiun",),
    "Morocco Standard Time/MA": ("Africa/Casablanca",),
    # (UTC+01:00) Amsterdam, Berlin, Bern, Rome, Stockholm, Vienna
    "W. Europe Standard Time": ("Europe/Berlin",),
    "W. Europe Standard Time/AD": ("Europe/Andorra",),
    "W. Europe Standard Time/AT": ("Europe/Vienna",),
    "W. Europe Standard Time/CH": ("Europe/Zurich",),
    "W. Europe Standard Time/DE": ("Europe/Berlin", "Europe/Busingen"),
    "W. Europe Standard Time/GI": ("Europe/Gibraltar",),
    "W. Europe Standard Time/IT": ("Europe/Rome",),
    "W. Europe Standard Time/LI": ("Europe/Vaduz",),
    "W. Europe Standard Time/LU": ("Europe/Luxembourg",),
    "W. Europe Standard Time/MC": ("Europe/Monaco",),
    "W. Europe Standard Time/MT": ("Europe/Malta",),
    "W. Europe Standard Time/NL": ("Europe/Amsterdam",),
    "W. Europe Standard Time/NO": ("Europe/Oslo",),
    "W. Europe Standard Time/SE": ("Europe/Stockholm",),
    "W. Europe Standard Time/SJ": ("Arctic/Longyearbyen",),
    "W. Europe Standard Time/SM": ("Europe/San_Marino",),
    "W. Europe Standard Time/VA": ("Europe/Vatican",),
    # (UTC+01:00) Belgrade, Bratislava, Budapest, Ljubljana, Prague
    "Central Europe Standard Time": ("Europe/Budapest",),
    "Central Europe Standard Time/AL": ("Europe/Tirane",),
    "Central Europe Standard Time/CZ": ("Europe/Prague",),
    "Central Europe Standard Time/HU": ("Europe/Budapest",),
    "Central Europe Standard Time/ME": ("Europe/Podgorica",),
    "Central Europe Standard Time/RS": ("Europe/Belgrade",),
    "Central Europe Standard Time/SI": ("Europe/Ljubljana",),
    "Central Europe Standard Time/SK": ("Europe/Bratislava",),
    # (UTC+01:00) Brussels, Copenhagen, Madrid, Paris
    "Romance Standard Time": ("Europe/Paris",),
    "Romance Standard Time/BE": ("Europe/Brussels",),
    "Romance Standard Time/DK": ("Europe/Copenhagen",),
    "Romance Standard Time/ES": ("Europe/Madrid", "Africa/Ceuta"),
    "Romance Standard Time/FR": ("Europe/Paris",),
    # (UTC+01:00) Sarajevo, Skopje, Warsaw, Zagreb
    "Central European Standard Time": ("Europe/Warsaw",),
    "Central European Standard Time/BA": ("Europe/Sarajevo",),
    "Central European Standard Time/HR": ("Europe/Zagreb",),
    "Central European Standard Time/MK": ("Europe/Skopje",),
    "Central European Standard Time/PL": ("Europe/Warsaw",),
    # (UTC+01:00) West Central Africa
    "W. Central Africa Standard Time": ("Africa/Lagos",),
    "W. Central Africa Standard Time/AO": ("Africa/Luanda",),
    "W. Central Africa Standard Time/BJ": ("Africa/Porto-Novo",),
    "W. Central Africa Standard Time/CD": ("Africa/Kinshasa",),
    "W. Central Africa Standard Time/CF": ("Africa/Bangui",),
    "W. Central Africa Standard Time/CG": ("Africa/Brazzaville",),
    "W. Central Africa Standard Time/CM": ("Africa/Douala",),
    "W. Central Africa Standard Time/DZ": ("Africa/Algiers",),
    "W. Central Africa Standard Time/GA": ("Africa/Libreville",),
    "W. Central Africa Standard Time/GQ": ("Africa/Malabo",),
    "W. Central Africa Standard Time/NE": ("Africa/Niamey",),
    "W. Central Africa Standard Time/NG": ("Africa/Lagos",),
    "W. Central Africa Standard Time/TD": ("Africa/Ndjamena",),
    "W. Central Africa Standard Time/TN": ("Africa/Tunis",),
    "W. Central Africa Standard Time/ZZ": ("Etc/GMT-1",),
    # (UTC+02:00) Amman
    "Jordan Standard Time": ("Asia/Amman",),
    "Jordan Standard Time/JO": ("Asia/Amman",),
    # (UTC+02:00) Athens, Bucharest
    "GTB Standard Time": ("Europe/Bucharest",),
    "GTB Standard Time/CY": ("Asia/Nicosia", "Asia/Famagusta"),
    "GTB Standard Time/GR": ("Europe/Athens",),
    "GTB Standard Time/RO": ("Europe/Bucharest",),
    # (UTC+02:00) Beirut
    "Middle East Standard Time": ("Asia/Beirut",),
    "Middle East Standard Time/LB": ("Asia/Beirut",),
    # (UTC+02:00) Cairo
    "Egypt Standard Time": ("Africa/Cairo",),
    "Egypt Standard Time/EG": ("Africa/Cairo",),
    # (UTC+02:00) Chisinau
    "E. Europe Standard Time": ("Europe/Chisinau",),
    "E. Europe Standard Time/MD": ("Europe/Chisinau",),
    # (UTC+02:00) Damascus
    "Syria Standard Time": ("Asia/Damascus",),
    "Syria Standard Time/SY": ("Asia/Damascus",),
    # (UTC+02:00) Gaza, Hebron
    "West Bank Standard Time": ("Asia/Hebron",),
    "West Bank Standard Time/PS": ("Asia/Hebron", "Asia/Gaza"),
    # (UTC+02:00) Harare, Pretoria
    "South Africa Standard Time": ("Africa/Johannesburg",),
    "South Africa Standard Time/BI": ("Africa/Bujumbura",),
    "South Africa Standard Time/BW": ("Africa/Gaborone",),
    "South Africa Standard Time/CD": ("Africa/Lubumbashi",),
    "South Africa Standard Time/LS": ("Africa/Maseru",),
    "South Africa Standard Time/MW": ("Africa/Blantyre",),
    "South Africa Standard Time/MZ": ("Africa/Maputo",),
    "South Africa Standard Time/RW": ("Africa/Kigali",),
    "South Africa Standard Time/SZ": ("Africa/Mbabane",),
    "South Africa Standard Time/ZA": ("Africa/Johannesburg",),
    "South Africa Standard Time/ZM": ("Africa/Lusaka",),
    "South Africa Standard Time/ZW": ("Africa/Harare",),
    "South Africa Standard Time/ZZ": ("Etc/GMT-2",),
    # (UTC+02:00) Helsinki, Kyiv, Riga, Sofia, Tallinn, Vilnius
    "FLE Standard Time": ("Europe/Kiev",),
    "FLE Standard Time/AX": ("Europe/Mariehamn",),
    "FLE Standard Time/BG": ("Europe/Sofia",),
    "FLE Standard Time/EE": ("Europe/Tallinn",),
    "FLE Standard Time/FI": ("Europe/Helsinki",),
    "FLE Standard Time/LT": ("Europe/Vilnius",),
    "FLE Standard Time/LV": ("Europe/Riga",),
    "FLE Standard Time/UA": ("Europe/Kiev", "Europe/Uzhgorod", "Europe/Zaporozhye"),
    # (UTC+02:00) Jerusalem
    "Israel Standard Time": ("Asia/Jerusalem",),
    "Israel Standard Time/IL": ("Asia/Jerusalem",),
    # (UTC+02:00) Juba
    "South Sudan Standard Time": ("Africa/Juba",),
    "South Sudan Standard Time/SS": ("Africa/Juba",),
    # (UTC+02:00) Kaliningrad
    "Kaliningrad Standard Time": ("Europe/Kaliningrad",),
    "Kaliningrad Standard Time/RU": ("Europe/Kaliningrad",),
    # (UTC+02:00) Khartoum
    "Sudan Standard Time": ("Africa/Khartoum",),
    "Sudan Standard Time/SD": ("Africa/Khartoum",),
    # (UTC+02:00) Tripoli
    "Libya Standard Time": ("Africa/Tripoli",),
    "Libya Standard Time/LY": ("Africa/Tripoli",),
    # (UTC+02:00) Windhoek
    "Namibia Standard Time": ("Africa/Windhoek",),
    "Namibia Standard Time/NA": ("Africa/Windhoek",),
    # (UTC+03:00) Baghdad
    "Arabic Standard Time": ("Asia/Baghdad",),
    "Arabic Standard Time/IQ": ("Asia/Baghdad",),
    # (UTC+03:00) Istanbul
    "Turkey Standard Time": ("Europe/Istanbul",),
    "Turkey Standard Time/TR": ("Europe/Istanbul",),
    # (UTC+03:00) Kuwait, Riyadh
    "Arab Standard Time": ("Asia/Riyadh",),
    "Arab Standard Time/BH": ("Asia/Bahrain",),
    "Arab Standard Time/KW": ("Asia/Kuwait",),
    "Arab Standard Time/QA": ("Asia/Qatar",),
    "Arab Standard Time/SA": ("Asia/Riyadh",),
    "Arab Standard Time/YE": ("Asia/Aden",),
    # (UTC+03:00) Minsk
    "Belarus Standard Time": ("Europe/Minsk",),
    "Belarus Standard Time/BY": ("Europe/Minsk",),
    # (UTC+03:00) Moscow, St. Petersburg
    "Russian Standard Time": ("Europe/Moscow",),
    "Russian Standard Time/RU": ("Europe/Moscow", "Europe/Kirov"),
    "Russian Standard Time/UA": ("Europe/Simferopol",),
    # (UTC+03:00) Nairobi
    "E. Africa Standard Time": ("Africa/Nairobi",),
    "E. Africa Standard Time/AQ": ("Antarctica/Syowa",),
    "E. Africa Standard Time/DJ": ("Africa/Djibouti",),
    "E. Africa Standard Time/ER": ("Africa/Asmera",),
    "E. Africa Standard Time/ET": ("Africa/Addis_Ababa",),
    "E. Africa Standard Time/KE": ("Africa/Nairobi",),
    "E. Africa Standard Time/KM": ("Indian/Comoro",),
    "E. Africa Standard Time/MG": ("Indian/Antananarivo",),
    "E. Africa Standard Time/SO": ("Africa/Mogadishu",),
    "E. Africa Standard Time/TZ": ("Africa/Dar_es_Salaam",),
    "E. Africa Standard Time/UG": ("Africa/Kampala",),
    "E. Africa Standard Time/YT": ("Indian/Mayotte",),
    "E. Africa Standard Time/ZZ": ("Etc/GMT-3",),
    # (UTC+03:00) Volgograd
    "Volgograd Standard Time": ("Europe/Volgograd",),
    "Volgograd Standard Time/RU": ("Europe/Volgograd",),
    # (UTC+03:30) Tehran
    "Iran Standard Time": ("Asia/Tehran",),
    "Iran Standard Time/IR": ("Asia/Tehran",),
    # (UTC+04:00) Abu Dhabi, Muscat
    "Arabian Standard Time": ("Asia/Dubai",),
    "Arabian Standard Time/AE": ("Asia/Dubai",),
    "Arabian Standard Time/OM": ("Asia/Muscat",),
    "Arabian Standard Time/ZZ": ("Etc/GMT-4",),
    # (UTC+04:00) Astrakhan, Ulyanovsk
    "Astrakhan Standard Time": ("Europe/Astrakhan",),
    "Astrakhan Standard Time/RU": ("Europe/Astrakhan", "Europe/Ulyanovsk"),
    # (UTC+04:00) Baku
    "Azerbaijan Standard Time": ("Asia/Baku",),
    "Azerbaijan Standard Time/AZ": ("Asia/Baku",),
    # (UTC+04:00) Izhevsk, Samara
    "Russia Time Zone 3": ("Europe/Samara",),
    "Russia Time Zone 3/RU": ("Europe/Samara",),
    # (UTC+04:00) Port Louis
    "Mauritius Standard Time": ("Indian/Mauritius",),
    "Mauritius Standard Time/MU": ("Indian/Mauritius",),
    "Mauritius Standard Time/RE": ("Indian/Reunion",),
    "Mauritius Standard Time/SC": ("Indian/Mahe",),
    # (UTC+04:00) Saratov
    "Saratov Standard Time": ("Europe/Saratov",),
    "Saratov Standard Time/RU": ("Europe/Saratov",),
    # (UTC+04:00) Tbilisi
    "Georgian Standard Time": ("Asia/Tbilisi",),
    "Georgian Standard Time/GE": ("Asia/Tbilisi",),
    # (UTC+04:00) Yerevan
    "Caucasus Standard Time": ("Asia/Yerevan",),
    "Caucasus Standard Time/AM": ("Asia/Yerevan",),
    # (UTC+04:30) Kabul
    "Afghanistan Standard Time": ("Asia/Kabul",),
    "Afghanistan Standard Time/AF": ("Asia/Kabul",),
    # (UTC+05:00) Ashgabat, Tashkent
    "West Asia Standard Time": ("Asia/Tashkent",),
    "West Asia Standard Time/AQ": ("Antarctica/Mawson",),
    "West Asia Standard Time/KZ": (
        "Asia/Oral",
        "Asia/Aqtau",
        "Asia/Aqtobe",
        "Asia/Atyrau",
    ),
    "West Asia Standard Time/MV": ("Indian/Maldives",),
    "West Asia Standard Time/TF": ("Indian/Kerguelen",),
    "West Asia Standard Time/TJ": ("Asia/Dushanbe",),
    "West Asia Standard Time/TM": ("Asia/Ashgabat",),
    "West Asia Standard Time/UZ": ("Asia/Tashkent", "Asia/Samarkand"),
    "West Asia Standard Time/ZZ": ("Etc/GMT-5",),
    # (UTC+05:00) Ekaterinburg
    "Ekaterinburg Standard Time": ("Asia/Yekaterinburg",),
    "Ekaterinburg Standard Time/RU": ("Asia/Yekaterinburg",),
    # (UTC+05:00) Islamabad, Karachi
    "Pakistan Standard Time": ("Asia/Karachi",),
    "Pakistan Standard Time/PK": ("Asia/Karachi",),
    # (UTC+05:00) Qyzylorda
    "Qyzylorda Standard Time": ("Asia/Qyzylorda",),
    "Qyzylorda Standard Time/KZ": ("Asia/Qyzylorda",),
    # (UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi
    "India Standard Time": ("Asia/Calcutta",),
    "India Standard Time/IN": ("Asia/Calcutta",),
    # (UTC+05:30) Sri Jayawardenepura
    "Sri Lanka Standard Time": ("Asia/Colombo",),
    "Sri Lanka Standard Time/LK": ("Asia/Colombo",),
    # (UTC+05:45) Kathmandu
    "Nepal Standard Time": ("Asia/Katmandu",),
    "Nepal Standard Time/NP": ("Asia/Katmandu",),
    # (UTC+06:00) Astana
    "Central Asia Standard Time": ("Asia/Bishkek",),
    "Central Asia Standard Time/AQ": ("Antarctica/Vostok",),
    "Central Asia Standard Time/CN": ("Asia/Urumqi",),
    "Central Asia Standard Time/IO": ("Indian/Chagos",),
    "Central Asia Standard Time/KG": ("Asia/Bishkek",),
    "Central Asia Standard Time/KZ": ("Asia/Almaty", "Asia/Qostanay"),
    "Central Asia Standard Time/ZZ": ("Etc/GMT-6",),
    # (UTC+06:00) Dhaka
    "Bangladesh Standard Time": ("Asia/Dhaka",),
    "Bangladesh Standard Time/BD": ("Asia/Dhaka",),
    "Bangladesh Standard Time/BT": ("Asia/Thimphu",),
    # (UTC+06:00) Omsk
    "Omsk Standard Time": ("Asia/Omsk",),
    "Omsk Standard Time/RU": ("Asia/Omsk",),
    # (UTC+06:30) Yangon (Rangoon)
    "Myanmar Standard Time": ("Asia/Rangoon",),
    "Myanmar Standard Time/CC": ("Indian/Cocos",),
    "Myanmar Standard Time/MM": ("Asia/Rangoon",),
    # (UTC+07:00) Bangkok, Hanoi, Jakarta
    "SE Asia Standard Time": ("Asia/Bangkok",),
    "SE Asia Standard Time/AQ": ("Antarctica/Davis",),
    "SE Asia Standard Time/CX": ("Indian/Christmas",),
    "SE Asia Standard Time/ID": ("Asia/Jakarta", "Asia/Pontianak"),
    "SE Asia Standard Time/KH": ("Asia/Phnom_Penh",),
    "SE Asia Standard Time/LA": ("Asia/Vientiane",),
    "SE Asia Standard Time/TH": ("Asia/Bangkok",),
    "SE Asia Standard Time/VN": ("Asia/Saigon",),
    "SE Asia Standard Time/ZZ": ("Etc/GMT-7",),
    # (UTC+07:00) Barnaul, Gorno-Altaysk
    "Altai Standard Time": ("Asia/Barnaul",),
    "Altai Standard Time/RU": ("Asia/Barnaul",),
    # (UTC+07:00) Hovd
    "W. Mongolia Standard Time": ("Asia/Hovd",),
    "W. Mongolia Standard Time/MN": ("Asia/Hovd",),
    # (UTC+07:00) Krasnoyarsk
    "North Asia Standard Time": ("Asia/Krasnoyarsk",),
    "North Asia Standard Time/RU": ("Asia/Krasnoyarsk", "Asia/Novokuznetsk"),
    # (UTC+07:00) Novosibirsk
    "N. Central Asia Standard Time": ("Asia/Novosibirsk",),
    "N. Central Asia Standard Time/RU": ("Asia/Novosibirsk",),
    # (UTC+07:00) Tomsk
    "Tomsk Standard Time": ("Asia/Tomsk",),
    "Tomsk Standard Time/RU": ("Asia/Tomsk",),
    # (UTC+08:00) Beijing, Chongqing, Hong Kong, Urumqi
    "China Standard Time": ("Asia/Shanghai",),
    "China Standard Time/CN": ("Asia/Shanghai",),
    "China Standard Time/HK": ("Asia/Hong_Kong",),
    "China Standard Time/MO": ("Asia/Macau",),
    # (UTC+08:00) Irkutsk
    "North Asia East Standard Time": ("Asia/Irkutsk",),
    "North Asia East Standard Time/RU": ("Asia/Irkutsk",),
    # (UTC+08:00) Kuala Lumpur, Singapore
    "Singapore Standard Time": ("Asia/Singapore",),
    "Singapore Standard Time/BN": ("Asia/Brunei",),
    "Singapore Standard Time/ID": ("Asia/Makassar",),
    "Singapore Standard Time/MY": ("Asia/Kuala_Lumpur", "Asia/Kuching"),
    "Singapore Standard Time/PH": ("Asia/Manila",),
    "Singapore Standard Time/SG": ("Asia/Singapore",),
    "Singapore Standard Time/ZZ": ("Etc/GMT-8",),
    # (UTC+08:00) Perth
    "W. Australia Standard Time": ("Australia/Perth",),
    "W. Australia Standard Time/AU": ("Australia/Perth",),
    # (UTC+08:00) Taipei
    "Taipei Standard Time": ("Asia/Taipei",),
    "Taipei Standard Time/TW": ("Asia/Taipei",),
    # (UTC+08:00) Ulaanbaatar
    "Ulaanbaatar Standard Time": ("Asia/Ulaanbaatar",),
    "Ulaanbaatar Standard Time/MN": ("Asia/Ulaanbaatar", "Asia/Choibalsan"),
    # (UTC+08:45) Eucla
    "Aus Central W. Standard Time": ("Australia/Eucla",),
    "Aus Central W. Standard Time/AU": ("Australia/Eucla",),
    # (UTC+09:00) Chita
    "Transbaikal Standard Time": ("Asia/Chita",),
    "Transbaikal Standard Time/RU": ("Asia/Chita",),
    # (UTC+09:00) Osaka, Sapporo, Tokyo
    "Tokyo Standard Time": ("Asia/Tokyo",),
    "Tokyo Standard Time/ID": ("Asia/Jayapura",),
    "Tokyo Standard Time/JP": ("Asia/Tokyo",),
    "Tokyo Standard Time/PW": ("Pacific/Palau",),
    "Tokyo Standard Time/TL": ("Asia/Dili",),
    "Tokyo Standard Time/ZZ": ("Etc/GMT-9",),
    # (UTC+09:00) Pyongyang
    "North Korea Standard Time": ("Asia/Pyongyang",),
    "North Korea Standard Time/KP": ("Asia/Pyongyang",),
    # (UTC+09:00) Seoul
    "Korea Standard Time": ("Asia/Seoul",),
    "Korea Standard Time/KR": ("Asia/Seoul",),
    # (UTC+09:00) Yakutsk
    "Yakutsk Standard Time": ("Asia/Yakutsk",),
    "Yakutsk Standard Time/RU": ("Asia/Yakutsk", "Asia/Khandyga"),
    # (UTC+09:30) Adelaide
    "Cen. Australia Standard Time": ("Australia/Adelaide",),
    "Cen. Australia Standard Time/AU": (
        "Australia/Adelaide",
        "Australia/Broken_Hill",
    ),
    # (UTC+09:30) Darwin
    "AUS Central Standard Time": ("Australia/Darwin",),
    "AUS Central Standard Time/AU": ("Australia/Darwin",),
    # (UTC+10:00) Brisbane
    "E. Australia Standard Time": ("Australia/Brisbane",),
    "E. Australia Standard Time/AU": ("Australia/Brisbane", "Australia/Lindeman"),
    # (UTC+10:00) Canberra, Melbourne, Sydney
    "AUS Eastern Standard Time": ("Australia/Sydney",),
    "AUS Eastern Standard Time/AU": ("Australia/Sydney", "Australia/Melbourne"),
    # (UTC+10:00) Guam, Port Moresby
    "West Pacific Standard Time": ("Pacific/Port_Moresby",),
    "West Pacific Standard Time/AQ": ("Antarctica/DumontDUrville",),
    "West Pacific Standard Time/FM": ("Pacific/Truk",),
    "West Pacific Standard Time/GU": ("Pacific/Guam",),
    "West Pacific Standard Time/MP": ("Pacific/Saipan",),
    "West Pacific Standard Time/PG": ("Pacific/Port_Moresby",),
    "West Pacific Standard Time/ZZ": ("Etc/GMT-10",),
    # (UTC+10:00) Hobart
    "Tasmania Standard Time": ("Australia/Hobart",),
    "Tasmania Standard Time/AU": ("Australia/Hobart", "Antarctica/Macquarie"),
    # (UTC+10:00) Vladivostok
    "Vladivostok Standard Time": ("Asia/Vladivostok",),
    "Vladivostok Standard Time/RU": ("Asia/Vladivostok", "Asia/Ust-Nera"),
    # (UTC+10:30) Lord Howe Island
    "Lord Howe Standard Time": ("Australia/Lord_Howe",),
    "Lord Howe Standard Time/AU": ("Australia/Lord_Howe",),
    # (UTC+11:00) Bougainville Island
    "Bougainville Standard Time": ("Pacific/Bougainville",),
    "Bougainville Standard Time/PG": ("Pacific/Bougainville",),
    # (UTC+11:00) Chokurdakh
    "Russia Time Zone 10": ("Asia/Srednekolymsk",),
    "Russia Time Zone 10/RU": ("Asia/Srednekolymsk",),
    # (UTC+11:00) Magadan
    "Magadan Standard Time": ("Asia/Magadan",),
    "Magadan Standard Time/RU": ("Asia/Magadan",),
    # (UTC+11:00) Norfolk Island
    "Norfolk Standard Time": ("Pacific/Norfolk",),
    "Norfolk Standard Time/NF": ("Pacific/Norfolk",),
    # (UTC+11:00) Sakhalin
    "Sakhalin Standard Time": ("Asia/Sakhalin",),
    "Sakhalin Standard Time/RU": ("Asia/Sakhalin",),
    # (UTC+11:00) Solomon Is., New Caledonia
    "Central Pacific Standard Time": ("Pacific/Guadalcanal",),
    "Central Pacific Standard Time/AQ": ("Antarctica/Casey",),
    "Central Pacific Standard Time/FM": ("Pacific/Ponape", "Pacific/Kosrae"),
    "Central Pacific Standard Time/NC": ("Pacific/Noumea",),
    "Central Pacific Standard Time/SB": ("Pacific/Guadalcanal",),
    "Central Pacific Standard Time/VU": ("Pacific/Efate",),
    "Central Pacific Standard Time/ZZ": ("Etc/GMT-11",),
    # (UTC+12:00) Anadyr, Petropavlovsk-Kamchatsky
    "Russia Time Zone 11": ("Asia/Kamchatka",),
    "Russia Time Zone 11/RU": ("Asia/Kamchatka", "Asia/Anadyr"),
    # (UTC+12:00) Auckland, Wellington
    "New Zealand Standard Time": ("Pacific/Auckland",),
    "New Zealand Standard Time/AQ": ("Antarctica/McMurdo",),
    "New Zealand Standard Time/NZ": ("Pacific/Auckland",),
    # (UTC+12:00) Coordinated Universal Time+12
    "UTC+12": ("Etc/GMT-12",),
    "UTC+12/KI": ("Pacific/Tarawa",),
    "UTC+12/MH": ("Pacific/Majuro", "Pacific/Kwajalein"),
    "UTC+12/NR": ("Pacific/Nauru",),
    "UTC+12/TV": ("Pacific/Funafuti",),
    "UTC+12/UM": ("Pacific/Wake",),
    "UTC+12/WF": ("Pacific/Wallis",),
    "UTC+12/ZZ": ("Etc/GMT-12",),
    # (UTC+12:00) Fiji
    "Fiji Standard Time": ("Pacific/Fiji",),
    "Fiji Standard Time/FJ": ("Pacific/Fiji",),
    # (UTC+12:45) Chatham Islands
    "Chatham Islands Standard Time": ("Pacific/Chatham",),
    "Chatham Islands Standard Time/NZ": ("Pacific/Chatham",),
    # (UTC+13:00) Coordinated Universal Time+13
    "UTC+13": ("Etc/GMT-13",),
    "UTC+13/KI": ("Pacific/Enderbury",),
    "UTC+13/TK": ("Pacific/Fakaofo",),
    "UTC+13/ZZ": ("Etc/GMT-13",),
    # (UTC+13:00) Nuku'alofa
    "Tonga Standard Time": ("Pacific/Tongatapu",),
    "Tonga Standard Time/TO": ("Pacific/Tongatapu",),
    # (UTC+13:00) Samoa
    "Samoa Standard Time": ("Pacific/Apia",),
    "Samoa Standard Time/WS": ("Pacific/Apia",),
    # (UTC+14:00) Kiritimati Island
    "Line Islands Standard Time": ("Pacific/Kiritimati",),
    "Line Islands Standard Time/KI": ("Pacific/Kiritimati",),
    "Line Islands Standard Time/ZZ": ("Etc/GMT-14",),
}
