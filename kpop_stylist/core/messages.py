"""User-facing messages returned by the consultation endpoint."""

MISSING_FIELDS = "모든 필드를 입력해주세요."
API_KEY_MISSING = "API 키가 설정되지 않았습니다."
REPORT_FAILED = "AI 분석 중 오류가 발생했습니다."
SERVER_ERROR = "서버 오류가 발생했습니다."
REPORT_PLACEHOLDER = "보고서를 생성할 수 없습니다."
METHOD_NOT_ALLOWED = "Method not allowed"
