"""
Display Application Service
"""
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.models.analysis.results import NetworkAnalysisResult, QueryResponse
    from ...domain.models.network import NetworkNode, NetworkSnapshot


class Colors:
    """ANSI color codes for terminal output."""
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class DisplayService:
    """
    Service for formatting and displaying board network snapshots, analysis
    results and query answers in the terminal.
    """
    Colors = Colors

    @staticmethod
    def colored(text: str, color: str, bold: bool = False) -> str:
        """Apply color to text."""
        style = Colors.BOLD if bold else ""
        return f"{style}{color}{text}{Colors.RESET}"

    @staticmethod
    def risk_color(risk_level: float) -> str:
        if risk_level >= 0.75:
            return Colors.RED
        if risk_level >= 0.6:
            return Colors.YELLOW
        return Colors.BLUE

    @staticmethod
    def influence_color(level: str) -> str:
        return {
            "critical": Colors.RED,
            "high": Colors.YELLOW,
            "medium": Colors.BLUE,
            "low": Colors.GRAY,
        }.get(level.lower(), Colors.RESET)

    def print_header(self, title: str, char: str = "=", width: int = 78) -> None:
        """Print a formatted header."""
        print(f"\n{self.colored(char * width, Colors.CYAN)}")
        print(f"{self.colored(f' {title} '.center(width), Colors.CYAN, bold=True)}")
        print(f"{self.colored(char * width, Colors.CYAN)}")

    def print_subheader(self, title: str, char: str = "-", width: int = 78) -> None:
        """Print a formatted subheader."""
        print(f"\n{self.colored(f' {title} ', Colors.WHITE, bold=True)}")
        print(f"{self.colored(char * width, Colors.GRAY)}")

    # --- Network Display ---

    def display_network_summary(self, snapshot: "NetworkSnapshot") -> None:
        """Display graph structure and metrics."""
        self.print_subheader("Network Summary")
        m = snapshot.metrics
        print(f"  {'Members:':<22} {len(snapshot.nodes)}")
        print(f"  {'Relationships:':<22} {len(snapshot.edges)}")
        print(f"  {'Clusters:':<22} {len(snapshot.clusters)}")
        print(f"  {'Density:':<22} {m.density:.4f}")
        print(f"  {'Clustering Coeff.:':<22} {m.clustering_coefficient:.4f}")
        print(f"  {'Avg Path Length:':<22} {m.average_path_length:.2f}")
        print(f"  {'Centralization:':<22} {m.centralization:.4f}")
        print(f"  {'Modularity:':<22} {m.modularity:.4f} ({m.community_count} communities)")
        dist = m.influence_distribution
        conc_color = Colors.RED if dist.concentrated > 0.5 else Colors.GREEN
        print(f"  {'Top-20% Influence:':<22} {self.colored(f'{dist.concentrated:.1%}', conc_color)}")

        if snapshot.clusters:
            self.print_subheader("Clusters")
            for cluster in snapshot.clusters:
                level = cluster.influence_level.value
                print(
                    f"  {cluster.name:<28} {len(cluster.members):>3} members  "
                    f"{self.colored(level.upper(), self.influence_color(level))}"
                )

    def display_layout(self, nodes: List["NetworkNode"], layout: str) -> None:
        self.print_subheader(f"Layout: {layout}")
        print(f"  {'Member':<24} {'x':>9} {'y':>9} {'z':>9}")
        for node in nodes:
            p = node.position
            print(f"  {node.name[:24]:<24} {p.x:>9.2f} {p.y:>9.2f} {p.z:>9.2f}")

    # --- Analysis Display ---

    def display_analysis(self, result: "NetworkAnalysisResult") -> None:
        """Display influencers, isolation, bridges, opportunities and risks."""
        self.print_subheader("Key Influencers")
        if not result.key_influencers:
            print(f"  {self.colored('None above the influence threshold', Colors.GRAY)}")
        for node in result.key_influencers:
            print(f"  {node.name:<28} influence {node.influence_score:.2f}")

        self.print_subheader("Connectivity")
        isolated = ", ".join(n.name for n in result.isolated_members) or "-"
        bridges = ", ".join(n.name for n in result.communication_bridges) or "-"
        iso_color = Colors.YELLOW if result.isolated_members else Colors.GREEN
        print(f"  {'Isolated:':<22} {self.colored(isolated, iso_color)}")
        print(f"  {'Bridges:':<22} {bridges}")
        print(f"  {'Potential Conflicts:':<22} {len(result.potential_conflicts)}")

        if result.collaboration_opportunities:
            self.print_subheader("Collaboration Opportunities")
            for opp in result.collaboration_opportunities:
                print(f"  {opp.source} ↔ {opp.target}  potential {opp.potential:.2f}")

        self.print_subheader("Risk Patterns")
        if not result.has_risks:
            print(f"  {self.colored('No risk patterns detected', Colors.GREEN)}")
        for risk in result.risk_patterns:
            color = self.risk_color(risk.risk_level)
            print(
                f"  {self.colored(risk.type.value.upper(), color, bold=True)} "
                f"({risk.risk_level:.1f}) {risk.description}"
            )
            print(f"    Affected: {', '.join(risk.affected_members)}")
            for rec in risk.recommendations:
                print(f"    {self.colored('→', Colors.CYAN)} {rec}")

    def display_query_response(self, response: "QueryResponse") -> None:
        self.print_subheader(f"Query ({response.intent.value})")
        print(f"  {response.natural_language_response}")
        if response.visualization_focus and response.visualization_focus.nodes:
            print(f"  {self.colored('Focus:', Colors.GRAY)} {', '.join(response.visualization_focus.nodes)}")
