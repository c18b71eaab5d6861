"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "천체 탐험",
        "en": "Celestial Explorer",
    },
    "label_date": {
        "ko": "날짜",
        "en": "Date",
    },
    "label_time": {
        "ko": "시각",
        "en": "Time",
    },
    "label_earth_orbit": {
        "ko": "지구 공전",
        "en": "Earth orbit",
    },
    "label_moon_orbit": {
        "ko": "달 공전",
        "en": "Moon orbit",
    },
    "label_drag_target": {
        "ko": "움직일 천체",
        "en": "Drag",
    },
    "label_paused": {
        "ko": "일시정지",
        "en": "Pause",
    },
    "body_sun": {
        "ko": "태양",
        "en": "Sun",
    },
    "body_earth": {
        "ko": "지구",
        "en": "Earth",
    },
    "body_moon": {
        "ko": "달",
        "en": "Moon",
    },
    "body_view": {
        "ko": "시점",
        "en": "View",
    },
    "btn_open_universe": {
        "ko": "🚀 우주 열기",
        "en": "🚀 Open Universe",
    },
    "btn_return_home": {
        "ko": "🏠 돌아가기",
        "en": "🏠 Return Home",
    },
    "btn_release": {
        "ko": "놓기",
        "en": "Release",
    },
    "hint_drag": {
        "ko": "행성을 클릭해 위치 변경 | 마우스휠로 줌",
        "en": "Click the map to move the selected body | Scroll to zoom",
    },
    "minimap_title": {
        "ko": "우주 실시간",
        "en": "Universe Live",
    },
    "error_time": {
        "ko": "시각은 HH:MM 형식으로 입력하세요",
        "en": "Enter the time as HH:MM",
    },
    "constellation_leo": {
        "ko": "사자자리",
        "en": "Leo",
    },
    "constellation_big_dipper": {
        "ko": "북두칠성",
        "en": "Big Dipper",
    },
    "constellation_pegasus": {
        "ko": "페가수스",
        "en": "Pegasus",
    },
    "constellation_cassiopeia": {
        "ko": "카시오페아",
        "en": "Cassiopeia",
    },
    "phase_new_moon": {
        "ko": "삭",
        "en": "New Moon",
    },
    "phase_waxing_crescent": {
        "ko": "초승달",
        "en": "Waxing Crescent",
    },
    "phase_first_quarter": {
        "ko": "상현달",
        "en": "First Quarter",
    },
    "phase_waxing_gibbous": {
        "ko": "상현망",
        "en": "Waxing Gibbous",
    },
    "phase_full_moon": {
        "ko": "보름달",
        "en": "Full Moon",
    },
    "phase_waning_gibbous": {
        "ko": "하현망",
        "en": "Waning Gibbous",
    },
    "phase_last_quarter": {
        "ko": "하현달",
        "en": "Last Quarter",
    },
    "phase_waning_crescent": {
        "ko": "그믐달",
        "en": "Waning Crescent",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
