"""Embedded ISO 3166-1 dataset.

The default table bundled with the package: one entry per assigned
country or territory, in source order (alphabetical by English name).
The table is part of the compatibility surface; consumers may depend on
specific entries being present.

Rows are kept as plain tuples and turned into CountryRecord instances once,
on first call to default_records().

Row layout:
    (name, short_name, alpha2, alpha3, numeric, currencies)

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: E501 - one row per entry keeps the table diffable

from functools import cache

from isocountries.record import CountryRecord

__all__ = [
    "default_records",
]

type _Row = tuple[str, str, str, str, str, tuple[str, ...]]

_COUNTRIES: tuple[_Row, ...] = (
    ("Afghanistan", "Afghanistan", "AF", "AFG", "004", ("AFN",)),
    ("Åland Islands", "Åland Islands", "AX", "ALA", "248", ("EUR",)),
    ("Albania", "Albania", "AL", "ALB", "008", ("ALL",)),
    ("Algeria", "Algeria", "DZ", "DZA", "012", ("DZD",)),
    ("American Samoa", "American Samoa", "AS", "ASM", "016", ("USD",)),
    ("Andorra", "Andorra", "AD", "AND", "020", ("EUR",)),
    ("Angola", "Angola", "AO", "AGO", "024", ("AOA",)),
    ("Anguilla", "Anguilla", "AI", "AIA", "660", ("XCD",)),
    ("Antarctica", "Antarctica", "AQ", "ATA", "010", (
        "ARS", "AUD", "BGN", "BRL", "BYR", "CLP", "CNY", "CZK", "EUR",
        "GBP", "INR", "JPY", "KRW", "NOK", "NZD", "PEN", "PKR", "PLN",
        "RON", "RUB", "SEK", "UAH", "USD", "UYU", "ZAR",
    )),
    ("Antigua and Barbuda", "Antigua and Barbuda", "AG", "ATG", "028", ("XCD",)),
    ("Argentina", "Argentina", "AR", "ARG", "032", ("ARS",)),
    ("Armenia", "Armenia", "AM", "ARM", "051", ("AMD",)),
    ("Aruba", "Aruba", "AW", "ABW", "533", ("AWG",)),
    ("Australia", "Australia", "AU", "AUS", "036", ("AUD",)),
    ("Austria", "Austria", "AT", "AUT", "040", ("EUR",)),
    ("Azerbaijan", "Azerbaijan", "AZ", "AZE", "031", ("AZN",)),
    ("Bahamas", "Bahamas", "BS", "BHS", "044", ("BSD",)),
    ("Bahrain", "Bahrain", "BH", "BHR", "048", ("BHD",)),
    ("Bangladesh", "Bangladesh", "BD", "BGD", "050", ("BDT",)),
    ("Barbados", "Barbados", "BB", "BRB", "052", ("BBD",)),
    ("Belarus", "Belarus", "BY", "BLR", "112", ("BYN",)),
    ("Belgium", "Belgium", "BE", "BEL", "056", ("EUR",)),
    ("Belize", "Belize", "BZ", "BLZ", "084", ("BZD",)),
    ("Benin", "Benin", "BJ", "BEN", "204", ("XOF",)),
    ("Bermuda", "Bermuda", "BM", "BMU", "060", ("BMD",)),
    ("Bhutan", "Bhutan", "BT", "BTN", "064", ("BTN",)),
    ("Bolivia (Plurinational State of)", "Bolivia", "BO", "BOL", "068", ("BOB",)),
    ("Bonaire, Sint Eustatius and Saba", "Bonaire", "BQ", "BES", "535", ("USD",)),
    ("Bosnia and Herzegovina", "Bosnia and Herzegovina", "BA", "BIH", "070", ("BAM",)),
    ("Botswana", "Botswana", "BW", "BWA", "072", ("BWP",)),
    ("Bouvet Island", "Bouvet Island", "BV", "BVT", "074", ("NOK",)),
    ("Brazil", "Brazil", "BR", "BRA", "076", ("BRL",)),
    ("British Indian Ocean Territory", "British Indian Ocean Territory", "IO", "IOT", "086", ("GBP",)),
    ("Brunei Darussalam", "Brunei Darussalam", "BN", "BRN", "096", ("BND", "SGD")),
    ("Bulgaria", "Bulgaria", "BG", "BGR", "100", ("BGN",)),
    ("Burkina Faso", "Burkina Faso", "BF", "BFA", "854", ("XOF",)),
    ("Burundi", "Burundi", "BI", "BDI", "108", ("BIF",)),
    ("Cabo Verde", "Cabo Verde", "CV", "CPV", "132", ("CVE",)),
    ("Cambodia", "Cambodia", "KH", "KHM", "116", ("KHR",)),
    ("Cameroon", "Cameroon", "CM", "CMR", "120", ("XAF",)),
    ("Canada", "Canada", "CA", "CAN", "124", ("CAD",)),
    ("Cayman Islands", "Cayman Islands", "KY", "CYM", "136", ("KYD",)),
    ("Central African Republic", "Central African Republic", "CF", "CAF", "140", ("XAF",)),
    ("Chad", "Chad", "TD", "TCD", "148", ("XAF",)),
    ("Chile", "Chile", "CL", "CHL", "152", ("CLP",)),
    ("China", "China", "CN", "CHN", "156", ("CNY",)),
    ("Christmas Island", "Christmas Island", "CX", "CXR", "162", ("AUD",)),
    ("Cocos (Keeling) Islands", "Cocos (Keeling) Islands", "CC", "CCK", "166", ("AUD",)),
    ("Colombia", "Colombia", "CO", "COL", "170", ("COP",)),
    ("Comoros", "Comoros", "KM", "COM", "174", ("KMF",)),
    ("Congo", "Congo", "CG", "COG", "178", ("XAF",)),
    ("Congo (Democratic Republic of the)", "Congo", "CD", "COD", "180", ("CDF",)),
    ("Cook Islands", "Cook Islands", "CK", "COK", "184", ("NZD",)),
    ("Costa Rica", "Costa Rica", "CR", "CRI", "188", ("CRC",)),
    ("Côte d'Ivoire", "Côte d'Ivoire", "CI", "CIV", "384", ("XOF",)),
    ("Croatia", "Croatia", "HR", "HRV", "191", ("HRK",)),
    ("Cuba", "Cuba", "CU", "CUB", "192", ("CUC", "CUP")),
    ("Curaçao", "Curaçao", "CW", "CUW", "531", ("ANG",)),
    ("Cyprus", "Cyprus", "CY", "CYP", "196", ("EUR",)),
    ("Czechia", "Czechia", "CZ", "CZE", "203", ("CZK",)),
    ("Denmark", "Denmark", "DK", "DNK", "208", ("DKK",)),
    ("Djibouti", "Djibouti", "DJ", "DJI", "262", ("DJF",)),
    ("Dominica", "Dominica", "DM", "DMA", "212", ("XCD",)),
    ("Dominican Republic", "Dominican Republic", "DO", "DOM", "214", ("DOP",)),
    ("Ecuador", "Ecuador", "EC", "ECU", "218", ("USD",)),
    ("Egypt", "Egypt", "EG", "EGY", "818", ("EGP",)),
    ("El Salvador", "El Salvador", "SV", "SLV", "222", ("USD",)),
    ("Equatorial Guinea", "Equatorial Guinea", "GQ", "GNQ", "226", ("XAF",)),
    ("Eritrea", "Eritrea", "ER", "ERI", "232", ("ERN",)),
    ("Estonia", "Estonia", "EE", "EST", "233", ("EEK",)),
    ("Ethiopia", "Ethiopia", "ET", "ETH", "231", ("ETB",)),
    ("Falkland Islands (Malvinas)", "Falkland Islands", "FK", "FLK", "238", ("FKP",)),
    ("Faroe Islands", "Faroe Islands", "FO", "FRO", "234", ("DKK",)),
    ("Fiji", "Fiji", "FJ", "FJI", "242", ("FJD",)),
    ("Finland", "Finland", "FI", "FIN", "246", ("EUR",)),
    ("France", "France", "FR", "FRA", "250", ("EUR",)),
    ("French Guiana", "French Guiana", "GF", "GUF", "254", ("EUR",)),
    ("French Polynesia", "French Polynesia", "PF", "PYF", "258", ("XPF",)),
    ("French Southern Territories", "French Southern Territories", "TF", "ATF", "260", ("EUR",)),
    ("Gabon", "Gabon", "GA", "GAB", "266", ("XAF",)),
    ("Gambia", "Gambia", "GM", "GMB", "270", ("GMD",)),
    ("Georgia", "Georgia", "GE", "GEO", "268", ("GEL",)),
    ("Germany", "Germany", "DE", "DEU", "276", ("EUR",)),
    ("Ghana", "Ghana", "GH", "GHA", "288", ("GHS",)),
    ("Gibraltar", "Gibraltar", "GI", "GIB", "292", ("GIP",)),
    ("Greece", "Greece", "GR", "GRC", "300", ("EUR",)),
    ("Greenland", "Greenland", "GL", "GRL", "304", ("DKK",)),
    ("Grenada", "Grenada", "GD", "GRD", "308", ("XCD",)),
    ("Guadeloupe", "Guadeloupe", "GP", "GLP", "312", ("EUR",)),
    ("Guam", "Guam", "GU", "GUM", "316", ("USD",)),
    ("Guatemala", "Guatemala", "GT", "GTM", "320", ("GTQ",)),
    ("Guernsey", "Guernsey", "GG", "GGY", "831", ("GBP",)),
    ("Guinea", "Guinea", "GN", "GIN", "324", ("GNF",)),
    ("Guinea-Bissau", "Guinea-Bissau", "GW", "GNB", "624", ("XOF",)),
    ("Guyana", "Guyana", "GY", "GUY", "328", ("GYD",)),
    ("Haiti", "Haiti", "HT", "HTI", "332", ("HTG",)),
    ("Heard Island and McDonald Islands", "Heard Island and McDonald Islands", "HM", "HMD", "334", ("AUD",)),
    ("Holy See", "Holy See", "VA", "VAT", "336", ("EUR",)),
    ("Honduras", "Honduras", "HN", "HND", "340", ("HNL",)),
    ("Hong Kong", "Hong Kong", "HK", "HKG", "344", ("HKD",)),
    ("Hungary", "Hungary", "HU", "HUN", "348", ("HUF",)),
    ("Iceland", "Iceland", "IS", "ISL", "352", ("ISK",)),
    ("India", "India", "IN", "IND", "356", ("INR",)),
    ("Indonesia", "Indonesia", "ID", "IDN", "360", ("IDR",)),
    ("Iran (Islamic Republic of)", "Iran", "IR", "IRN", "364", ("IRR",)),
    ("Iraq", "Iraq", "IQ", "IRQ", "368", ("IQD",)),
    ("Ireland", "Ireland", "IE", "IRL", "372", ("EUR",)),
    ("Isle of Man", "Isle of Man", "IM", "IMN", "833", ("GBP",)),
    ("Israel", "Israel", "IL", "ISR", "376", ("ILS",)),
    ("Italy", "Italy", "IT", "ITA", "380", ("EUR",)),
    ("Jamaica", "Jamaica", "JM", "JAM", "388", ("JMD",)),
    ("Japan", "Japan", "JP", "JPN", "392", ("JPY",)),
    ("Jersey", "Jersey", "JE", "JEY", "832", ("GBP",)),
    ("Jordan", "Jordan", "JO", "JOR", "400", ("JOD",)),
    ("Kazakhstan", "Kazakhstan", "KZ", "KAZ", "398", ("KZT",)),
    ("Kenya", "Kenya", "KE", "KEN", "404", ("KES",)),
    ("Kiribati", "Kiribati", "KI", "KIR", "296", ("AUD",)),
    ("Korea (Democratic People's Republic of)", "North Korea", "KP", "PRK", "408", ("KPW",)),
    ("Korea (Republic of)", "South Korea", "KR", "KOR", "410", ("KRW",)),
    ("Kuwait", "Kuwait", "KW", "KWT", "414", ("KWD",)),
    ("Kyrgyzstan", "Kyrgyzstan", "KG", "KGZ", "417", ("KGS",)),
    ("Lao People's Democratic Republic", "Lao People's Democratic Republic", "LA", "LAO", "418", ("LAK",)),
    ("Latvia", "Latvia", "LV", "LVA", "428", ("LVL",)),
    ("Lebanon", "Lebanon", "LB", "LBN", "422", ("LBP",)),
    ("Lesotho", "Lesotho", "LS", "LSO", "426", ("LSL", "ZAR")),
    ("Liberia", "Liberia", "LR", "LBR", "430", ("LRD",)),
    ("Libya", "Libya", "LY", "LBY", "434", ("LYD",)),
    ("Liechtenstein", "Liechtenstein", "LI", "LIE", "438", ("CHF",)),
    ("Lithuania", "Lithuania", "LT", "LTU", "440", ("EUR",)),
    ("Luxembourg", "Luxembourg", "LU", "LUX", "442", ("EUR",)),
    ("Macao", "Macao", "MO", "MAC", "446", ("MOP",)),
    ("Macedonia (the former Yugoslav Republic of)", "Macedonia", "MK", "MKD", "807", ("MKD",)),
    ("Madagascar", "Madagascar", "MG", "MDG", "450", ("MGA",)),
    ("Malawi", "Malawi", "MW", "MWI", "454", ("MWK",)),
    ("Malaysia", "Malaysia", "MY", "MYS", "458", ("MYR",)),
    ("Maldives", "Maldives", "MV", "MDV", "462", ("MVR",)),
    ("Mali", "Mali", "ML", "MLI", "466", ("XOF",)),
    ("Malta", "Malta", "MT", "MLT", "470", ("EUR",)),
    ("Marshall Islands", "Marshall Islands", "MH", "MHL", "584", ("USD",)),
    ("Martinique", "Martinique", "MQ", "MTQ", "474", ("EUR",)),
    ("Mauritania", "Mauritania", "MR", "MRT", "478", ("MRO",)),
    ("Mauritius", "Mauritius", "MU", "MUS", "480", ("MUR",)),
    ("Mayotte", "Mayotte", "YT", "MYT", "175", ("EUR",)),
    ("Mexico", "Mexico", "MX", "MEX", "484", ("MXN",)),
    ("Micronesia (Federated States of)", "Micronesia", "FM", "FSM", "583", ("USD",)),
    ("Moldova (Republic of)", "Moldova", "MD", "MDA", "498", ("MDL",)),
    ("Monaco", "Monaco", "MC", "MCO", "492", ("EUR",)),
    ("Mongolia", "Mongolia", "MN", "MNG", "496", ("MNT",)),
    ("Montenegro", "Montenegro", "ME", "MNE", "499", ("EUR",)),
    ("Montserrat", "Montserrat", "MS", "MSR", "500", ("XCD",)),
    ("Morocco", "Morocco", "MA", "MAR", "504", ("MAD",)),
    ("Mozambique", "Mozambique", "MZ", "MOZ", "508", ("MZN",)),
    ("Myanmar", "Myanmar", "MM", "MMR", "104", ("MMK",)),
    ("Namibia", "Namibia", "NA", "NAM", "516", ("NAD", "ZAR")),
    ("Nauru", "Nauru", "NR", "NRU", "520", ("AUD",)),
    ("Nepal", "Nepal", "NP", "NPL", "524", ("NPR",)),
    ("Netherlands", "Netherlands", "NL", "NLD", "528", ("EUR",)),
    ("New Caledonia", "New Caledonia", "NC", "NCL", "540", ("XPF",)),
    ("New Zealand", "New Zealand", "NZ", "NZL", "554", ("NZD",)),
    ("Nicaragua", "Nicaragua", "NI", "NIC", "558", ("NIO",)),
    ("Niger", "Niger", "NE", "NER", "562", ("XOF",)),
    ("Nigeria", "Nigeria", "NG", "NGA", "566", ("NGN",)),
    ("Niue", "Niue", "NU", "NIU", "570", ("NZD",)),
    ("Norfolk Island", "Norfolk Island", "NF", "NFK", "574", ("AUD",)),
    ("Northern Mariana Islands", "Northern Mariana Islands", "MP", "MNP", "580", ("USD",)),
    ("Norway", "Norway", "NO", "NOR", "578", ("NOK",)),
    ("Oman", "Oman", "OM", "OMN", "512", ("OMR",)),
    ("Pakistan", "Pakistan", "PK", "PAK", "586", ("PKR",)),
    ("Palau", "Palau", "PW", "PLW", "585", ("USD",)),
    ("Palestine, State of", "Palestine", "PS", "PSE", "275", ("ILS",)),
    ("Panama", "Panama", "PA", "PAN", "591", ("PAB",)),
    ("Papua New Guinea", "Papua New Guinea", "PG", "PNG", "598", ("PGK",)),
    ("Paraguay", "Paraguay", "PY", "PRY", "600", ("PYG",)),
    ("Peru", "Peru", "PE", "PER", "604", ("PEN",)),
    ("Philippines", "Philippines", "PH", "PHL", "608", ("PHP",)),
    ("Pitcairn", "Pitcairn", "PN", "PCN", "612", ("NZD",)),
    ("Poland", "Poland", "PL", "POL", "616", ("PLN",)),
    ("Portugal", "Portugal", "PT", "PRT", "620", ("EUR",)),
    ("Puerto Rico", "Puerto Rico", "PR", "PRI", "630", ("USD",)),
    ("Qatar", "Qatar", "QA", "QAT", "634", ("QAR",)),
    ("Réunion", "Réunion", "RE", "REU", "638", ("EUR",)),
    ("Romania", "Romania", "RO", "ROU", "642", ("RON",)),
    ("Russian Federation", "Russian Federation", "RU", "RUS", "643", ("RUB",)),
    ("Rwanda", "Rwanda", "RW", "RWA", "646", ("RWF",)),
    ("Saint Barthélemy", "Saint Barthélemy", "BL", "BLM", "652", ("EUR",)),
    ("Saint Helena, Ascension and Tristan da Cunha", "Saint Helena", "SH", "SHN", "654", ("SHP",)),
    ("Saint Kitts and Nevis", "Saint Kitts and Nevis", "KN", "KNA", "659", ("XCD",)),
    ("Saint Lucia", "Saint Lucia", "LC", "LCA", "662", ("XCD",)),
    ("Saint Martin (French part)", "Saint Martin", "MF", "MAF", "663", ("EUR", "USD")),
    ("Saint Pierre and Miquelon", "Saint Pierre and Miquelon", "PM", "SPM", "666", ("EUR",)),
    ("Saint Vincent and the Grenadines", "Saint Vincent and the Grenadines", "VC", "VCT", "670", ("XCD",)),
    ("Samoa", "Samoa", "WS", "WSM", "882", ("WST",)),
    ("San Marino", "San Marino", "SM", "SMR", "674", ("EUR",)),
    ("Sao Tome and Principe", "Sao Tome and Principe", "ST", "STP", "678", ("STD",)),
    ("Saudi Arabia", "Saudi Arabia", "SA", "SAU", "682", ("SAR",)),
    ("Senegal", "Senegal", "SN", "SEN", "686", ("XOF",)),
    ("Serbia", "Serbia", "RS", "SRB", "688", ("RSD",)),
    ("Seychelles", "Seychelles", "SC", "SYC", "690", ("SCR",)),
    ("Sierra Leone", "Sierra Leone", "SL", "SLE", "694", ("SLL",)),
    ("Singapore", "Singapore", "SG", "SGP", "702", ("SGD",)),
    ("Sint Maarten (Dutch part)", "Sint Maarten", "SX", "SXM", "534", ("ANG",)),
    ("Slovakia", "Slovakia", "SK", "SVK", "703", ("EUR",)),
    ("Slovenia", "Slovenia", "SI", "SVN", "705", ("EUR",)),
    ("Solomon Islands", "Solomon Islands", "SB", "SLB", "090", ("SBD",)),
    ("Somalia", "Somalia", "SO", "SOM", "706", ("SOS",)),
    ("South Africa", "South Africa", "ZA", "ZAF", "710", ("ZAR",)),
    ("South Georgia and the South Sandwich Islands", "South Georgia", "GS", "SGS", "239", ("GBP",)),
    ("South Sudan", "South Sudan", "SS", "SSD", "728", ("SSP",)),
    ("Spain", "Spain", "ES", "ESP", "724", ("EUR",)),
    ("Sri Lanka", "Sri Lanka", "LK", "LKA", "144", ("LKR",)),
    ("Sudan", "Sudan", "SD", "SDN", "729", ("SDG",)),
    ("Suriname", "Suriname", "SR", "SUR", "740", ("SRD",)),
    ("Svalbard and Jan Mayen", "Svalbard and Jan Mayen", "SJ", "SJM", "744", ("NOK",)),
    ("Swaziland", "Swaziland", "SZ", "SWZ", "748", ("SZL", "ZAR")),
    ("Sweden", "Sweden", "SE", "SWE", "752", ("SEK",)),
    ("Switzerland", "Switzerland", "CH", "CHE", "756", ("CHF",)),
    ("Syrian Arab Republic", "Syrian Arab Republic", "SY", "SYR", "760", ("SYP",)),
    ("Taiwan (Province of China)", "Taiwan", "TW", "TWN", "158", ("TWD",)),
    ("Tajikistan", "Tajikistan", "TJ", "TJK", "762", ("TJS",)),
    ("Tanzania, United Republic of", "Tanzania", "TZ", "TZA", "834", ("TZS",)),
    ("Thailand", "Thailand", "TH", "THA", "764", ("THB",)),
    ("Timor-Leste", "Timor-Leste", "TL", "TLS", "626", ("USD",)),
    ("Togo", "Togo", "TG", "TGO", "768", ("XOF",)),
    ("Tokelau", "Tokelau", "TK", "TKL", "772", ("NZD",)),
    ("Tonga", "Tonga", "TO", "TON", "776", ("TOP",)),
    ("Trinidad and Tobago", "Trinidad and Tobago", "TT", "TTO", "780", ("TTD",)),
    ("Tunisia", "Tunisia", "TN", "TUN", "788", ("TND",)),
    ("Turkey", "Turkey", "TR", "TUR", "792", ("TRY",)),
    ("Turkmenistan", "Turkmenistan", "TM", "TKM", "795", ("TMT",)),
    ("Turks and Caicos Islands", "Turks and Caicos Islands", "TC", "TCA", "796", ("USD",)),
    ("Tuvalu", "Tuvalu", "TV", "TUV", "798", ("AUD",)),
    ("Uganda", "Uganda", "UG", "UGA", "800", ("UGX",)),
    ("Ukraine", "Ukraine", "UA", "UKR", "804", ("UAH",)),
    ("United Arab Emirates", "United Arab Emirates", "AE", "ARE", "784", ("AED",)),
    ("United Kingdom of Great Britain and Northern Ireland", "United Kingdom", "GB", "GBR", "826", ("GBP",)),
    ("United States of America", "United States", "US", "USA", "840", ("USD",)),
    ("United States Minor Outlying Islands", "United States Minor Islands", "UM", "UMI", "581", ("USD",)),
    ("Uruguay", "Uruguay", "UY", "URY", "858", ("UYU",)),
    ("Uzbekistan", "Uzbekistan", "UZ", "UZB", "860", ("UZS",)),
    ("Vanuatu", "Vanuatu", "VU", "VUT", "548", ("VUV",)),
    ("Venezuela (Bolivarian Republic of)", "Venezuela", "VE", "VEN", "862", ("VEF",)),
    ("Viet Nam", "Viet Nam", "VN", "VNM", "704", ("VND",)),
    ("Virgin Islands (British)", "Virgin Islands (British)", "VG", "VGB", "092", ("USD",)),
    ("Virgin Islands (U.S.)", "Virgin Islands (U.S.)", "VI", "VIR", "850", ("USD",)),
    ("Wallis and Futuna", "Wallis and Futuna", "WF", "WLF", "876", ("XPF",)),
    ("Western Sahara", "Western Sahara", "EH", "ESH", "732", ("MAD",)),
    ("Yemen", "Yemen", "YE", "YEM", "887", ("YER",)),
    ("Zambia", "Zambia", "ZM", "ZMB", "894", ("ZMW",)),
    ("Zimbabwe", "Zimbabwe", "ZW", "ZWE", "716", ("BWP", "EUR", "GBP", "USD", "ZAR")),
)


@cache
def default_records() -> tuple[CountryRecord, ...]:
    """Return the bundled dataset as CountryRecord instances.

    Built on first call and shared afterwards; the tuple is never mutated, so
    every default Registry references the same records.

    Thread-safe. Concurrent first calls may build the tuple twice, but every
    caller observes a fully constructed, equal result.
    """
    return tuple(
        CountryRecord(
            name=name,
            short_name=short_name,
            alpha2=alpha2,
            alpha3=alpha3,
            numeric=numeric,
            currencies=currencies,
        )
        for name, short_name, alpha2, alpha3, numeric, currencies in _COUNTRIES
    )
