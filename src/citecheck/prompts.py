"""Prompt templates for article search, URL extraction and citation analysis.

Each builder embeds the caller's parameters and pins the output to a single
```json fenced block with literal English keys, which ``citecheck.decoder``
knows how to read. Optional parameters that are empty drop their clause
instead of being passed through blank.
"""

from citecheck.data import ArticleSummary, QueryParams

SEARCH_PROMPT = '"{keywords}"에 관한 한국어 뉴스 기사를 {start_date}부터 {end_date}까지의 기간에서 찾아줘.'

PUBLISHER_CLAUSE = ' 기사의 발행 언론사는 "{publisher}"여야 합니다.'

CITATION_CLAUSE = " 기사 본문에 해외 언론(예: 로이터, AP, 블룸버그, BBC 등)의 인용이 반드시 들어 있어야 합니다."

SEARCH_FORMAT_CLAUSE = (
    " 기사마다 제목, 핵심 내용을 담은 2-3문장 요약, 언론사, 원문 URL,"
    " 발행일(또는 최종 수정일, 'YYYY-MM-DD' 형식)을 알려줘."
    ' 응답은 영문 키 "title", "summary", "publisher", "url", "publishedDate"를 가진'
    " JSON 객체의 배열이어야 하며, 전체 응답을 하나의 JSON 마크다운 코드 블록에 담아줘."
)

EXTRACTION_PROMPT = """\
You extract structured data from news article URLs. Your output is parsed by \
a machine, so it must be valid JSON even when extraction fails.

Article URL: {url}

Extraction protocol:

1. Direct retrieval.
   - Use web search to find the indexed content of the exact URL "{url}".
   - Follow redirects and read the final destination page.
   - Take the main article body only; ignore ads, comments and navigation.

2. Title-based fallback.
   - If step 1 yields only a snippet, a paywall or nothing at all, recover the \
article title from whatever you found.
   - Search again for that title together with the likely publisher name to \
reach an accessible copy of the same article.

Output contract:

- On success (by either step), reply with exactly one JSON object inside a \
```json code block, with these keys:
  - "title": full article title
  - "publisher": name of the publication
  - "summary": thorough summary of the article's main points
  - "url": the URL given above, "{url}"
  - "publishedDate": publication date as YYYY-MM-DD, or null if unknown
- On failure (both steps exhausted), reply with the value null inside a \
```json code block.

Do not write anything outside the code block: no greetings, apologies or \
explanations.

Success example:
```json
{{
  "title": "...",
  "publisher": "...",
  "summary": "...",
  "url": "{url}",
  "publishedDate": "2024-05-21"
}}
```

Failure example:
```json
null
```"""

ANALYSIS_PROMPT = """\
You are a fact-checker for journalism. Verify how a Korean news article cites \
foreign press.

Korean article:
{article_details}

Work through the steps below in order and answer with a single JSON object in \
a ```json code block, shaped as described at the end.

Step 1. Detect a foreign-press citation.
   - Look for any statement or quote attributed to a non-Korean news outlet.
   - Recognise full names (The New York Times, The Washington Post, Reuters, \
Associated Press, Bloomberg, ...) as well as abbreviations (NYT, WP, AP, ...).
   - If found, record the outlet's standard English name as "source" and the \
quoted Korean sentence exactly as it appears as "quote".
   - If there is no such citation, set "citation" to null and return \
immediately with the other fields null as well.

Step 2. Locate the original article (only if step 1 found a citation).
   - Translate the Korean quote into English; call it the search quote.
   - Attempt 1: search for the exact search quote restricted to the outlet's \
domain (for example site:nytimes.com).
   - Attempt 2: search for the key entities of the search quote (people, \
places, concepts) together with the outlet's name.
   - Attempt 3: search for paraphrases carrying the same core meaning.
   - When any attempt succeeds, give the original title, a direct URL and the \
snippet of the original text that contains the quoted information.
   - Set "originalArticle" to null only if all three attempts fail.

Step 3. Evaluate fidelity (only if steps 1 and 2 both succeeded).
   - Compare the Korean quote with the original English snippet, neutrally, \
covering translation accuracy, preservation of context, omissions or \
additions, and shifts in nuance or tone. Write this in Korean as "summary".
   - Give "score" from 1 (badly inaccurate or misleading) to 5 (accurate and \
in context); decimals are allowed.
   - If a full evaluation is not possible, set "evaluation" to null.

Output shape:
{{
  "citation": {{ "source": "The New York Times", "quote": "..." }} | null,
  "originalArticle": {{ "title": "...", "url": "https://...", "snippet": "..." }} | null,
  "evaluation": {{ "summary": "...", "score": 4.5 }} | null
}}"""


def build_search_prompt(params: QueryParams) -> str:
    """Build the keyword search prompt.

    The date range is passed through verbatim; the model decides what
    "between" means.
    """
    prompt = SEARCH_PROMPT.format(
        keywords=params.keywords,
        start_date=params.start_date,
        end_date=params.end_date,
    )
    publisher = params.publisher.strip()
    if publisher:
        prompt += PUBLISHER_CLAUSE.format(publisher=publisher)
    if params.must_cite:
        prompt += CITATION_CLAUSE
    return prompt + SEARCH_FORMAT_CLAUSE


def build_extraction_prompt(url: str) -> str:
    """Build the prompt that pulls a single article out of ``url``."""
    return EXTRACTION_PROMPT.format(url=url)


def build_analysis_prompt(article: ArticleSummary) -> str:
    """Build the three-step citation analysis prompt for ``article``."""
    details = [f"- Title: {article.title}", f"- Content summary: {article.summary}"]
    if article.publisher:
        details.append(f"- Publisher: {article.publisher}")
    if article.url:
        details.append(f"- URL: {article.url}")
    return ANALYSIS_PROMPT.format(article_details="\n".join(details))
