"""
Report Generation Module
Creates human-readable Markdown reports from engine results
"""

from datetime import datetime


class ReportGenerator:
    """
    Generates Markdown reports from Cryptoscope results

    Sections are included only when the result carries data for them:
    - Key length estimates
    - Ranked candidates (keys and plaintexts)
    - Duplicate block ranking
    - Output encodings
    """

    def generate_markdown(self, result, title: str = "Analysis") -> str:
        """
        Generate Markdown report

        Args:
            result: CryptoscopeResult object
            title: Heading for the report

        Returns:
            Markdown formatted report as string
        """
        sections = [self._generate_header(title, result)]

        if result.key_lengths:
            sections.append(self._generate_key_length_section(result.key_lengths))

        if result.candidates:
            sections.append(self._generate_candidate_section(result.candidates))

        if result.block_scores:
            sections.append(self._generate_block_section(result.block_scores))

        if result.encodings:
            sections.append(self._generate_encoding_section(result.encodings))

        sections.append(self._generate_footer())

        return '\n\n'.join(sections)

    def _generate_header(self, title: str, result) -> str:
        """Generate report header"""
        return f"""# Cryptoscope Report: {title}

**Generated**: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}
**Operation**: `{result.operation}`
**Input**: `{result.input_name}`
**Input Size**: {self._format_bytes(result.input_size)}
"""

    def _generate_key_length_section(self, estimates) -> str:
        """Generate key length table (top 5)"""
        sections = ["## Key Length Estimates\n"]
        sections.append("| Key Length | Normalized Distance |")
        sections.append("|-----------|---------------------|")

        for estimate in estimates[:5]:
            sections.append(f"| {estimate.key_length} | {estimate.distance:.4f} |")

        return '\n'.join(sections)

    def _generate_candidate_section(self, candidates) -> str:
        sections = [f"## Candidates ({len(candidates)})\n"]

        for rank, candidate in enumerate(candidates[:10], 1):
            text = candidate.plaintext.to_text()
            first_line = text.splitlines()[0] if text else ""
            display = first_line[:80] + '...' if len(first_line) > 80 else first_line

            sections.append(f"### Rank {rank}")
            if candidate.source_index is not None:
                sections.append(f"**Line**: {candidate.source_index}")
            sections.append(f"**Key (hex)**: `{candidate.key_hex()}`")
            sections.append(f"**Score**: {candidate.score}")
            sections.append(f"**Plaintext**: `{display!r}`")
            sections.append("")

        if len(candidates) > 10:
            sections.append(f"*...and {len(candidates) - 10} more*")

        return '\n'.join(sections)

    def _generate_block_section(self, block_scores) -> str:
        """Generate duplicate block ranking"""
        sections = ["## Duplicate Block Ranking\n"]
        sections.append("| Line | Duplicate Blocks | Length |")
        sections.append("|------|------------------|--------|")

        for score in block_scores[:10]:
            sections.append(f"| {score.index} | {score.duplicate_blocks} | {len(score.buffer)} |")

        top = block_scores[0]
        if top.duplicate_blocks > 0:
            sections.append(f"\n**Likely ECB**: line {top.index}")
        else:
            sections.append("\nNo repeated blocks found.")

        return '\n'.join(sections)

    def _generate_encoding_section(self, encodings) -> str:
        sections = ["## Encodings\n"]
        for name, value in encodings.items():
            display = value[:120] + '...' if len(value) > 120 else value
            sections.append(f"- **{name}**: `{display!r}`")
        return '\n'.join(sections)

    def _generate_footer(self) -> str:
        """Generate report footer"""
        return """---

## Notes

- **Scores**: Heuristic English-likelihood; only relative ordering is meaningful
- **Key Lengths**: Lowest normalized Hamming distance is the best guess

**Generated by**: Cryptoscope v1.0
**License**: MIT

---
"""

    def _format_bytes(self, size: int) -> str:
        """Format byte size to human readable"""
        for unit in ['B', 'KB', 'MB', 'GB']:
            if size < 1024:
                return f"{size:.1f} {unit}"
            size /= 1024
        return f"{size:.1f} TB"
