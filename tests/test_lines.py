from posture_validator.utils.lines import find_line, line_of_offset


CONTENT = 'first\nposture_id = "a"\n\n  policy_id = "b"\n'


class TestFindLine:
    def test_returns_first_matching_line(self):
        assert find_line(CONTENT, r"posture_id") == 2
        assert find_line(CONTENT, r"policy_id\s*=") == 4

    def test_accepts_bytes(self):
        assert find_line(CONTENT.encode(), r"policy_id") == 4

    def test_first_line_is_one(self):
        assert find_line(CONTENT, "^first$") == 1

    def test_returns_none_when_not_found(self):
        assert find_line(CONTENT, "policy_set_id") is None

    def test_returns_none_for_invalid_pattern(self):
        assert find_line(CONTENT, "[unclosed") is None

    def test_returns_none_for_empty_content(self):
        assert find_line("", "anything") is None

    def test_does_not_match_across_lines(self):
        assert find_line('posture_id =\n"a"', r'posture_id\s*=\s*"a"') is None


class TestLineOfOffset:
    def test_offset_zero_is_line_one(self):
        assert line_of_offset(CONTENT, 0) == 1

    def test_counts_newlines_before_offset(self):
        assert line_of_offset(CONTENT, CONTENT.index("policy_id")) == 4

    def test_offset_on_newline_belongs_to_its_line(self):
        assert line_of_offset(CONTENT, CONTENT.index("\n")) == 1

    def test_bytes_content(self):
        data = CONTENT.encode()
        assert line_of_offset(data, data.index(b"posture_id")) == 2
