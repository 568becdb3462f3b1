"""All magic values live here — no inline literals anywhere else."""

# Telegram chat action re-send interval (seconds).
# Chat actions expire after ~5 s, so we refresh every 4 s.
TELEGRAM_ACTION_INTERVAL: float = 4.0
TELEGRAM_MAX_MESSAGE_LEN = 4096

# Uploads
UPLOAD_FOLDER_NAME = "Uploaded Articles"
PHOTO_MIME_TYPE = "image/jpeg"
UPLOAD_FILENAME = "photo_%s%s"
# Formats the upload control accepts, with the extension used for unnamed files.
ACCEPTED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}
ALBUM_DEBOUNCE_SECONDS: float = 0.5

# Vision backends
BACKEND_GEMINI = "gemini"
BACKEND_CLAUDE = "claude"
BACKEND_OPENAI = "openai"
GEMINI_VISION_MODEL = "gemini-2.5-flash"
CLAUDE_VISION_MODEL = "claude-opus-4-6"
OPENAI_VISION_MODEL = "gpt-4o"
CLAUDE_MAX_TOKENS = 4096
ARTICLE_TOOL_NAME = "record_article"
ARTICLE_TOOL_DESCRIPTION = "Record the extracted newspaper article title and text."
ARTICLE_SCHEMA_NAME = "article"

# Sentinels
NOT_FOUND_TITLE = "No relevant article found"
NOT_FOUND_TEXT = "No relevant article found."
ERROR_TITLE = "Error"
ERROR_TEXT_PREFIX = "Error: "

ARTICLE_EXTRACTION_PROMPT = f"""
You are an expert art historian and archivist. Your task is to analyze the provided newspaper image.
1.  Thoroughly scan the image to find any articles or text specifically mentioning the artist "Nam June Paik", "Nam Jun Paik", or "Paik Nam June".
2.  If an article is found, mentally "mask" or isolate only that specific article's content, ignoring all other content on the page (like ads, other articles, etc.).
3.  Identify the article's title. The title is the single largest and most prominent headline of that article.
4.  Sub-headlines and bylines are NOT the title. Treat them as part of the article's body text.
5.  Perform a highly accurate Optical Character Recognition (OCR) on the text within that isolated section.
6.  Reformat the extracted body text into clean paragraphs:
    - When a word is split across two lines with a hyphen at the end of the first line (e.g. "inte-" followed by "llectual"), join it into one word without the hyphen ("intellectual").
    - Merge lines that continue the same sentence or paragraph into a single line.
    - Separate distinct paragraphs with exactly one blank line.
    - Never leave a single bare newline inside a paragraph.
7.  Return a JSON object with two string fields: "title" (the article's title) and "text" (the reformatted body text).
8.  If no mention of the artist is found anywhere in the image, return "title": "{NOT_FOUND_TITLE}" and "text": "{NOT_FOUND_TEXT}".
""".strip()

# Export
CSV_HEADER = ("Folder Name", "File Name", "Text")
CSV_BOM = "\ufeff"
CSV_ENCODING = "utf-8"
CSV_FILENAME = "nam_june_paik_articles.csv"

# Log / user-facing messages
MSG_BOT_STARTING = "Starting newspaper clipping bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_SEND_FAIL = "✗ Send failed: %s"
MSG_BACKEND_SELECTED = "Vision backend: %s (%s)"
MSG_BATCH_START = "Analyzing %d image(s)…"
MSG_BATCH_DONE = "✓ Analyzed %d image(s) in %.1fs (%d article(s), %d error(s))"
MSG_FILE_FAILED = "Error analyzing %s"

# Error messages shown to the user
MSG_ERR_NO_FILES = "Please select at least one image file."
MSG_ERR_READ = "Could not read the image file."
MSG_ERR_EMPTY_FILE = "The image file is empty."
MSG_ERR_MODEL = "Failed to get a response from the AI model."
MSG_ERR_UNKNOWN = "An unknown error occurred."
MSG_ERR_BATCH = "An unexpected error occurred during analysis. Please check the logs."
MSG_ERR_NO_CREDENTIAL = (
    "GEMINI_API_KEY, ANTHROPIC_API_KEY or OPENAI_API_KEY must be set in .env"
)

# Bot replies
MSG_QUEUED = "%d image(s) queued. Send /analyze to start."
MSG_ANALYZING = "AI is analyzing %d image(s)… this may take a moment."
MSG_CLEARED = "Upload queue cleared."
MSG_NO_RESULTS = "Analysis results will be displayed here. Upload images and send /analyze."
MSG_RESULTS_HEADER = "Analysis Results — %d article(s) found in %d image(s)"
MSG_RESULTS_ERRORS = " (%d error(s))"
MSG_RESULT_ENTRY = "📁 %s / %s\n%s\n\n%s"

CMD_ANALYZE = "analyze"
CMD_RESULTS = "results"
CMD_EXPORT = "export"
CMD_CLEAR = "clear"
CMD_STATUS = "status"
CMD_HELP = "help"

MSG_STATUS = (
    "Status\n"
    "  Backend      : %s\n"
    "  Model        : %s\n"
    "  Queued       : %d\n"
    "  Last results : %d\n"
)

MSG_HELP = (
    "newsclip — Nam June Paik newspaper clipping extractor\n"
    "\n"
    "Upload:\n"
    "  Photo / image file       — queued for analysis\n"
    "  Album                    — every image is queued\n"
    "\n"
    "Commands:\n"
    "  /analyze                 — analyze every queued image\n"
    "  /results                 — show the last results again\n"
    "  /export                  — download the last results as CSV\n"
    "  /clear                   — empty the upload queue\n"
    "  /status                  — current config at a glance\n"
    "  /help                    — show this message\n"
)
