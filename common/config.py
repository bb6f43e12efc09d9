# Logging
LOGS_DIR_NAME = "logs"
DEMO_LOG_NAME = "patterns_demo"

# Section titles, in demo order
class Section:
    CHAIN = "Chain of Responsibility"
    COMMAND = "Command"
    ITERATOR = "Iterator"
    MEDIATOR = "Mediator"
    MEMENTO = "Memento"
    OBSERVER = "Observer"
    STATE = "State"
    STRATEGY = "Strategy"
    TEMPLATE_METHOD = "Template Method"
    VISITOR = "Visitor"

SECTION_ORDER = [
    Section.CHAIN,
    Section.COMMAND,
    Section.ITERATOR,
    Section.MEDIATOR,
    Section.MEMENTO,
    Section.OBSERVER,
    Section.STATE,
    Section.STRATEGY,
    Section.TEMPLATE_METHOD,
    Section.VISITOR,
]

HEADER_TEMPLATE = "=== {title} ==="

# Requests understood by the handler chain
class Request:
    AUTH = "auth"
    LOG = "log"

# Console messages
class Message:
    AUTH_HANDLED = "AuthHandler обробив запит"
    LOG_HANDLED = "LogHandler обробив запит"
    LIGHT_ON = "Світло ввімкнено"
    USER_SENT = "{name} відправив: {message}"
    USER_RECEIVED = "{name} отримав: {message}"
    CURRENT_STATE = "Поточний стан: {state}"
    NEWS_RECEIVED = "{name} отримав новину: {message}"
    STATE_START = "Стан: СТАРТ"
    STATE_STOP = "Стан: СТОП"
    FAST_STRATEGY = "Швидка стратегія"
    SLOW_STRATEGY = "Повільна стратегія"
    FOOTBALL_INITIALIZE = "Підготовка до футболу"
    FOOTBALL_START = "Початок гри у футбол"
    FOOTBALL_END = "Кінець матчу"
    BOOK_PRICE = "Ціна книги: {price} {currency}"
    PEN_PRICE = "Ціна ручки: {price} {currency}"

# Demo data
REPOSITORY_NAMES = ["Анна", "Богдан", "Іван"]
CHAT_USERS = ["Іван", "Оля"]
CHAT_GREETING = "Привіт!"
MEMENTO_FIRST_STATE = "Стан A"
MEMENTO_SECOND_STATE = "Стан B"
NEWS_READER = "Іван"
NEWS_HEADLINE = "Нова новина!"

# Prices
CURRENCY = "грн"
BOOK_PRICE = 100
PEN_PRICE = 20
