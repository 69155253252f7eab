transcript_template = (
    "Analyze this YouTube video URL: {url}. "
    "Provide the video title, author, and a comprehensive transcript or detailed summary "
    "of its contents based on your knowledge or search. Respond in JSON format."
)

translation_template = """
    Translate the following YouTube video transcript summary into natural, fluent {language}.
    Maintain the original meaning and technical terms if appropriate,
    but ensure it reads well in {language} script.

    Text: {text}
    """

translator_system_instruction = (
    "You are an expert translator specializing in English to {language} translation "
    "for technical and educational content."
)

TRANSLATION_FAILED_MESSAGE = "Failed to translate. Please try again."
