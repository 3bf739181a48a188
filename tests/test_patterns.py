"""Tests for ignore-pattern matching: directory, wildcard, exact/segment forms."""

from githooks.hooks import matches, should_ignore


class TestDirectoryPattern:
    def test_prefix(self):
        assert matches("dist/app.js", "dist/") is True

    def test_nested_segment(self):
        assert matches("a/dist/b.js", "dist/") is True

    def test_trailing_segment(self):
        assert matches("a/dist", "dist/") is True

    def test_deep_prefix(self):
        assert matches("node_modules/pkg/index.js", "node_modules/") is True

    def test_multi_segment_directory(self):
        assert matches("src/test/helper.ts", "src/test/") is True

    def test_no_partial_segment(self):
        assert matches("distribution/app.js", "dist/") is False
        assert matches("a/mydist/b.js", "dist/") is False

    def test_bare_name_without_parent(self):
        # "dist" alone neither starts with "dist/" nor ends with "/dist"
        assert matches("dist", "dist/") is False


class TestWildcardPattern:
    def test_extension(self):
        assert matches("error.log", "*.log") is True

    def test_extension_is_anchored(self):
        assert matches("error.logx", "*.log") is False

    def test_dot_is_literal(self):
        assert matches("errorxlog", "*.log") is False

    def test_basename_of_nested_file(self):
        assert matches("src/math.test.ts", "*.test.ts") is True

    def test_similar_extension_not_matched(self):
        assert matches("src/main.ts", "*.test.ts") is False

    def test_single_star_stays_in_segment(self):
        assert matches("src/app.js", "src/*.js") is True
        assert matches("src/lib/app.js", "src/*.js") is False

    def test_double_star_crosses_segments(self):
        assert matches("src/lib/deep/app.js", "src/**.js") is True
        assert matches("src/lib/app.js", "src/**/*.js") is True

    def test_pattern_with_slash_not_tried_on_basename(self):
        assert matches("other/src/app.js", "src/*.js") is False


class TestExactPattern:
    def test_exact(self):
        assert matches("test.txt", "test.txt") is True

    def test_trailing_segment(self):
        assert matches("docs/test.txt", "test.txt") is True

    def test_inner_segment(self):
        assert matches("src/test/helper.ts", "test") is True

    def test_no_partial_match(self):
        assert matches("mytest.txt", "test") is False
        assert matches("src/testing/a.ts", "test") is False


class TestShouldIgnore:
    def test_empty_patterns_never_ignore(self):
        assert should_ignore(["dist/app.js"], []) is False

    def test_empty_files_with_patterns(self):
        assert should_ignore([], ["dist/"]) is False

    def test_any_file_any_pattern(self):
        assert should_ignore(["src/a.py", "build.log"], ["dist/", "*.log"]) is True

    def test_no_match(self):
        assert should_ignore(["src/a.py", "README.md"], ["dist/", "*.log"]) is False

    def test_accepts_iterables(self):
        assert should_ignore(iter(["dist/x.js"]), ("dist/",)) is True
