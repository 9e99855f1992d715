HEADER_TEXT_MAX_LENGTH = 150  # 헤더 블록 텍스트 최대 글자 수 (슬랙 제한)
