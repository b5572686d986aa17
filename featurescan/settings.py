DEFAULT_WORK_DIR = "."
DEFAULT_PATTERN = "**/*.feature"
DEFAULT_LANGUAGE = "en"
DEFAULT_ENCODING = "utf-8"
