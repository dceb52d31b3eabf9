# Константы для directory browser tools

# Префикс скрытых файлов
HIDDEN_PREFIX = "."

# Ключ, под которым сервер передает навигатор сессии в аргументах инструмента
NAVIGATOR_ARGUMENT = "_navigator"

# Коды ошибок для некорректных аргументов и no-op состояний
INVALID_ARGUMENT_CODE = -1
