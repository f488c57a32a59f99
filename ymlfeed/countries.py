"""Country names accepted in an offer's country of origin."""

COUNTRIES: frozenset[str] = frozenset(
    {
        "Австралия",
        "Австрия",
        "Азербайджан",
        "Албания",
        "Алжир",
        "Американские Виргинские острова",
        "Ангилья",
        "Ангола",
        "Андорра",
        "Антигуа и Барбуда",
        "Аргентина",
        "Армения",
        "Аруба",
        "Афганистан",
        "Багамские острова",
        "Бангладеш",
        "Барбадос",
        "Бахрейн",
        "Беларусь",
        "Белиз",
        "Бельгия",
        "Бенин",
        "Бермудские Острова",
        "Болгария",
        "Боливия",
        "Босния и Герцеговина",
        "Ботсвана",
        "Бразилия",
        "Британские Виргинские острова",
        "Бруней",
        "Буркина-Фасо",
        "Бурунди",
        "Бутан",
        "Вануату",
        "Ватикан",
        "Великобритания",
        "Венгрия",
        "Венесуэла",
        "Восточный Тимор",
        "Вьетнам",
        "Габон",
        "Гайана",
        "Гаити",
        "Гамбия",
        "Гана",
        "Гваделупа",
        "Гватемала",
        "Гвинея",
        "Гвинея-Бисау",
        "Германия",
        "Гибралтар",
        "Гондурас",
        "Гонконг",
        "Гренада",
        "Гренландия",
        "Греция",
        "Грузия",
        "Дания",
        "Демократическая Республика Конго",
        "Джибути",
        "Доминика",
        "Доминиканская Республика",
        "Египет",
        "Замбия",
        "Западная Сахара",
        "Зимбабве",
        "Йемен",
        "Израиль",
        "Индия",
        "Индонезия",
        "Иордания",
        "Ирак",
        "Иран",
        "Ирландия",
        "Исландия",
        "Испания",
        "Италия",
        "Кабо-Верде",
        "Казахстан",
        "Каймановы острова",
        "Камбоджа",
        "Камерун",
        "Канада",
        "Катар",
        "Кения",
        "Кипр",
        "Киргизия",
        "Кирибати",
        "Китай",
        "Колумбия",
        "Коморские острова",
        "Коста-Рика",
        "Кот-д’Ивуар",
        "Куба",
        "Кувейт",
        "Лаос",
        "Латвия",
        "Лесото",
        "Либерия",
        "Ливан",
        "Ливия",
        "Литва",
        "Лихтенштейн",
        "Люксембург",
        "Маврикий",
        "Мавритания",
        "Мадагаскар",
        "Майотта",
        "Макао",
        "Македония",
        "Малави",
        "Малайзия",
        "Мали",
        "Мальдивы",
        "Мальта",
        "Марокко",
        "Маршалловы острова",
        "Мексика",
        "Мозамбик",
        "Молдова",
        "Монако",
        "Монголия",
        "Мьянма",
        "Намибия",
        "Науру",
        "Непал",
        "Нигер",
        "Нигерия",
        "Нидерланды",
        "Никарагуа",
        "Новая Зеландия",
        "Новая Каледония",
        "Норвегия",
        "Объединённые Арабские Эмираты",
        "Оман",
        "Острова Кука",
        "Пакистан",
        "Палау",
        "Панама",
        "Папуа - Новая Гвинея",
        "Парагвай",
        "Перу",
        "Польша",
        "Португалия",
        "Республика Конго",
        "Реюньон",
        "Россия",
        "Руанда",
        "Румыния",
        "Самоа",
        "Сан-Марино",
        "Сан-Томе и Принсипи",
        "Саудовская Аравия",
        "Свазиленд",
        "Северная Корея",
        "Сейшельские острова",
        "Сенегал",
        "Сент-Винсент и Гренадины",
        "Сент-Китс и Невис",
        "Сент-Люсия",
        "Сербия",
        "Сингапур",
        "Сирия",
        "Словакия",
        "Словения",
        "Сомали",
        "Судан",
        "Суринам",
        "США",
        "Сьерра-Леоне",
        "Таджикистан",
        "Таиланд",
        "Танзания",
        "Тёркс и Кайкос",
        "Того",
        "Тонга",
        "Тринидад и Тобаго",
        "Тувалу",
        "Тунис",
        "Туркмения",
        "Турция",
        "Уганда",
        "Узбекистан",
        "Украина",
        "Уругвай",
        "Федеративные Штаты Микронезии",
        "Фиджи",
        "Филиппины",
        "Финляндия",
        "Франция",
        "Французская Гвиана",
        "Французская Полинезия",
        "Хорватия",
        "Центрально-Африканская Республика",
        "Чад",
        "Черногория",
        "Чехия",
        "Чили",
        "Швейцария",
        "Швеция",
        "Шри-Ланка",
        "Эквадор",
        "Экваториальная Гвинея",
        "Эритрея",
        "Эстония",
        "Эфиопия",
        "ЮАР",
        "Южная Корея",
        "Ямайка",
        "Япония",
    }
)


def is_known_country(name: str) -> bool:
    """Return True if ``name`` is an allowed country of origin (exact match)."""
    return name in COUNTRIES