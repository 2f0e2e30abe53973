from dataclasses import dataclass, field


@dataclass(frozen=True)
class Section:
	heading: str
	body: str

	def __str__(self):
		return f"\n## {self.heading}\n\n{self.body}"


@dataclass(frozen=True)
class LinkSection:
	"""Extra block of links appended after the commit groups, e.g. downloads."""

	heading: str
	links: dict[str, str] = field(default_factory=dict)

	def to_section(self) -> Section:
		return Section(
			heading=self.heading,
			body="".join(f"* [{label}]({url})\n" for label, url in self.links.items()),
		)


@dataclass
class ReleaseNote:
	sections: list[Section] = field(default_factory=list)

	@property
	def headings(self) -> list[str]:
		return [section.heading for section in self.sections]

	def __str__(self):
		return "".join(str(section) for section in self.sections)
