"""Built-in reference data used when no override is configured."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

MIN_RESIGNATION_DATE = date(2009, 10, 1)

UK_COUNTRIES: tuple[str, ...] = (
    "England",
    "Wales",
    "Scotland",
    "Northern Ireland",
    "United Kingdom",
)

ALLOWED_COMPANY_TYPES: tuple[str, ...] = (
    "private-unlimited",
    "ltd",
    "plc",
    "private-limited-guarant-nsc-limited-exemption",
    "private-limited-guarant-nsc",
    "private-unlimited-nsc",
    "private-limited-shares-section-30-exemption",
)

ALLOWED_OFFICER_ROLES: tuple[str, ...] = (
    "director",
    "corporate-director",
    "nominee-director",
    "corporate-nominee-director",
)

COMPANY_TYPE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "private-unlimited": "Private unlimited company",
        "ltd": "Private limited company",
        "plc": "Public limited company",
        "old-public-company": "Old public company",
        "private-limited-guarant-nsc-limited-exemption": (
            "Private Limited Company by guarantee without share capital, "
            "use of 'Limited' exemption"
        ),
        "limited-partnership": "Limited partnership",
        "private-limited-guarant-nsc": (
            "Private limited by guarantee without share capital"
        ),
        "converted-or-closed": "Converted / closed",
        "private-unlimited-nsc": "Private unlimited company without share capital",
        "private-limited-shares-section-30-exemption": (
            "Private Limited Company, use of 'Limited' exemption"
        ),
        "protected-cell-company": "Protected cell company",
        "assurance-company": "Assurance company",
        "oversea-company": "Overseas company",
        "eeig": "European Economic Interest Grouping (EEIG)",
        "icvc-securities": "Investment company with variable capital",
        "icvc-warrant": "Investment company with variable capital",
        "icvc-umbrella": "Investment company with variable capital",
        "registered-society-non-jurisdictional": "Registered society",
        "industrial-and-provident-society": "Industrial and Provident society",
        "northern-ireland": "Northern Ireland company",
        "northern-ireland-other": "Credit union (Northern Ireland)",
        "llp": "Limited liability partnership",
        "royal-charter": "Royal charter company",
        "investment-company-with-variable-capital": "Investment company with variable capital",
        "unregistered-company": "Unregistered company",
        "other": "Other company type",
        "european-public-limited-liability-company-se": (
            "European public limited liability company (SE)"
        ),
        "uk-establishment": "UK establishment company",
        "scottish-partnership": "Scottish qualifying partnership",
        "charitable-incorporated-organisation": "Charitable incorporated organisation",
        "scottish-charitable-incorporated-organisation": (
            "Scottish charitable incorporated organisation"
        ),
        "further-education-or-sixth-form-college-corporation": (
            "Further education or sixth form college corporation"
        ),
        "registered-overseas-entity": "Overseas entity",
    }
)


def describe_company_type(company_type: str) -> str:
    return COMPANY_TYPE_DESCRIPTIONS.get(company_type, company_type)


ALLOWED_COUNTRIES: tuple[str, ...] = (
    "Afghanistan", "Aland Islands", "Albania", "Algeria", "American Samoa", "Andorra",
    "Angola", "Anguilla", "Antarctica", "Antigua and Barbuda", "Argentina", "Armenia",
    "Aruba", "Australia", "Austria", "Azerbaijan", "Bahamas", "Bahrain", "Bangladesh",
    "Barbados", "Belarus", "Belgium", "Belize", "Benin", "Bermuda", "Bhutan", "Bolivia",
    "Bonaire, Sint Eustatius and Saba", "Bosnia and Herzegovina", "Botswana",
    "Bouvet Island", "Brazil", "British Indian Ocean Territory", "British Virgin Islands",
    "Brunei", "Bulgaria", "Burkina Faso", "Burundi", "Cambodia", "Cameroon", "Canada",
    "Cape Verde", "Cayman Islands", "Central African Republic", "Chad", "Chile", "China",
    "Christmas Island", "Cocos (Keeling) Islands", "Colombia", "Comoros", "Congo",
    "Cook Islands", "Costa Rica", "Croatia", "Cuba", "Curacao", "Cyprus",
    "Czech Republic", "Democratic Republic of Congo", "Denmark", "Djibouti", "Dominica",
    "Dominican Republic", "East Timor", "Ecuador", "Egypt", "El Salvador", "England",
    "Equatorial Guinea", "Eritrea", "Estonia", "Ethiopia", "Falkland Islands",
    "Faroe Islands", "Fiji", "Finland", "France", "French Guiana", "French Polynesia",
    "French Southern Territories", "Gabon", "Gambia", "Georgia", "Germany", "Ghana",
    "Gibraltar", "Greece", "Greenland", "Grenada", "Guadeloupe", "Guam", "Guatemala",
    "Guernsey", "Guinea", "Guinea-Bissau", "Guyana", "Haiti",
    "Heard Island and McDonald Islands", "Honduras", "Hong Kong", "Hungary", "Iceland",
    "India", "Indonesia", "Iran", "Iraq", "Ireland", "Isle of Man", "Israel", "Italy",
    "Ivory Coast", "Jamaica", "Japan", "Jersey", "Jordan", "Kazakhstan", "Kenya",
    "Kiribati", "Kosovo", "Kuwait", "Kyrgyzstan", "Laos", "Latvia", "Lebanon", "Lesotho",
    "Liberia", "Libya", "Liechtenstein", "Lithuania", "Luxembourg", "Macao", "Macedonia",
    "Madagascar", "Malawi", "Malaysia", "Maldives", "Mali", "Malta", "Marshall Islands",
    "Martinique", "Mauritania", "Mauritius", "Mayotte", "Mexico", "Micronesia", "Moldova",
    "Monaco", "Mongolia", "Montenegro", "Montserrat", "Morocco", "Mozambique", "Myanmar",
    "Namibia", "Nauru", "Nepal", "Netherlands", "New Caledonia", "New Zealand",
    "Nicaragua", "Niger", "Nigeria", "Niue", "Norfolk Island", "North Korea",
    "Northern Ireland", "Northern Mariana Islands", "Norway", "Oman", "Pakistan", "Palau",
    "Palestine", "Panama", "Papua New Guinea", "Paraguay", "Peru", "Philippines",
    "Pitcairn", "Poland", "Portugal", "Puerto Rico", "Qatar", "Reunion", "Romania",
    "Russia", "Rwanda", "Saint Barthelemy", "Saint Helena, Ascension and Tristan da Cunha",
    "Saint Kitts and Nevis", "Saint Lucia", "Saint Martin (French part)",
    "Saint Pierre and Miquelon", "Saint Vincent and the Grenadines", "Samoa", "San Marino",
    "Sao Tome and Principe", "Saudi Arabia", "Scotland", "Senegal", "Serbia",
    "Seychelles", "Sierra Leone", "Singapore", "Sint Maarten (Dutch part)", "Slovakia",
    "Slovenia", "Solomon Islands", "Somalia", "South Africa",
    "South Georgia and the South Sandwich Islands", "South Korea", "South Sudan", "Spain",
    "Sri Lanka", "Sudan", "Suriname", "Svalbard and Jan Mayen", "Swaziland", "Sweden",
    "Switzerland", "Syria", "Taiwan", "Tajikistan", "Tanzania", "Thailand", "Togo",
    "Tokelau", "Tonga", "Trinidad and Tobago", "Tunisia", "Turkey", "Turkmenistan",
    "Turks and Caicos Islands", "Tuvalu", "Uganda", "Ukraine", "United Arab Emirates",
    "United Kingdom", "United States", "United States Minor Outlying Islands", "Uruguay",
    "Uzbekistan", "Vanuatu", "Vatican City", "Venezuela", "Vietnam",
    "Virgin Islands (U.S.)", "Wales", "Wallis and Futuna", "Western Sahara", "Yemen",
    "Zambia", "Zimbabwe",
)  # fmt: skip

ALLOWED_NATIONALITIES: tuple[str, ...] = (
    "Afghan", "Albanian", "Algerian", "American", "Andorran", "Angolan", "Anguillan",
    "Argentine", "Armenian", "Australian", "Austrian", "Azerbaijani", "Bahamian",
    "Bahraini", "Bangladeshi", "Barbadian", "Belarusian", "Belgian", "Belizean",
    "Beninese", "Bermudian", "Bhutanese", "Bolivian", "Botswanan", "Brazilian", "British",
    "British Virgin Islander", "Bruneian", "Bulgarian", "Burkinan", "Burmese", "Burundian",
    "Cambodian", "Cameroonian", "Canadian", "Cape Verdean", "Cayman Islander",
    "Central African", "Chadian", "Chilean", "Chinese", "Citizen of Antigua and Barbuda",
    "Citizen of Bosnia and Herzegovina", "Citizen of Guinea-Bissau", "Citizen of Kiribati",
    "Citizen of Seychelles", "Citizen of the Dominican Republic", "Citizen of Vanuatu",
    "Colombian", "Comoran", "Congolese (Congo)", "Congolese (DRC)", "Cook Islander",
    "Costa Rican", "Croatian", "Cuban", "Cymraes", "Cymro", "Cypriot", "Czech", "Danish",
    "Djiboutian", "Dominican", "Dutch", "East Timorese", "Ecuadorean", "Egyptian",
    "Emirati", "English", "Equatorial Guinean", "Eritrean", "Estonian", "Ethiopian",
    "Faroese", "Fijian", "Filipino", "Finnish", "French", "Gabonese", "Gambian",
    "Georgian", "German", "Ghanaian", "Gibraltarian", "Greek", "Greenlandic", "Grenadian",
    "Guamanian", "Guatemalan", "Guinean", "Guyanese", "Haitian", "Honduran",
    "Hong Konger", "Hungarian", "Icelandic", "Indian", "Indonesian", "Iranian", "Iraqi",
    "Irish", "Israeli", "Italian", "Ivorian", "Jamaican", "Japanese", "Jordanian",
    "Kazakh", "Kenyan", "Kittitian", "Kosovan", "Kuwaiti", "Kyrgyz", "Lao", "Latvian",
    "Lebanese", "Liberian", "Libyan", "Liechtenstein citizen", "Lithuanian",
    "Luxembourger", "Macanese", "Macedonian", "Malagasy", "Malawian", "Malaysian",
    "Maldivian", "Malian", "Maltese", "Marshallese", "Martiniquais", "Mauritanian",
    "Mauritian", "Mexican", "Micronesian", "Moldovan", "Monegasque", "Mongolian",
    "Montenegrin", "Montserratian", "Moroccan", "Mosotho", "Mozambican", "Namibian",
    "Nauruan", "Nepalese", "New Zealander", "Nicaraguan", "Nigerian", "Nigerien",
    "Niuean", "North Korean", "Northern Irish", "Norwegian", "Omani", "Pakistani",
    "Palauan", "Palestinian", "Panamanian", "Papua New Guinean", "Paraguayan", "Peruvian",
    "Pitcairn Islander", "Polish", "Portuguese", "Prydeinig", "Puerto Rican", "Qatari",
    "Romanian", "Russian", "Rwandan", "Salvadorean", "Sammarinese", "Samoan",
    "Sao Tomean", "Saudi Arabian", "Scottish", "Senegalese", "Serbian", "Sierra Leonean",
    "Singaporean", "Slovak", "Slovenian", "Solomon Islander", "Somali", "South African",
    "South Korean", "South Sudanese", "Spanish", "Sri Lankan", "St Helenian", "St Lucian",
    "Stateless", "Sudanese", "Surinamese", "Swazi", "Swedish", "Swiss", "Syrian",
    "Taiwanese", "Tajik", "Tanzanian", "Thai", "Togolese", "Tongan", "Trinidadian",
    "Tristanian", "Tunisian", "Turkish", "Turkmen", "Turks and Caicos Islander", "Tuvaluan",
    "Ugandan", "Ukrainian", "Uruguayan", "Uzbek", "Vatican citizen", "Venezuelan",
    "Vietnamese", "Vincentian", "Wallisian", "Welsh", "Yemeni", "Zambian", "Zimbabwean",
)  # fmt: skip
