"""
Movie Finder - search TMDB with typo-tolerant ranking and see what others search for.
"""

import streamlit as st
import sys
import os

# =============================================================================
# IMPORTS AND SETUP
# =============================================================================

# Add src directory to path for imports
current_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(current_dir, 'src')

if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from errors import SearchFailure, ConfigurationError
from movie_search import run_search
from search_metrics import get_trending_movies
from utils import get_poster_url, get_release_year, format_rating

GENERIC_ERROR_MESSAGE = "Error fetching movies. Please try again later."
CARDS_PER_ROW = 4

# =============================================================================
# SESSION STATE MANAGEMENT
# =============================================================================

def initialize_session_state():
    """Initialize all required session state variables."""
    if "search_term" not in st.session_state:
        st.session_state.search_term = ""

    # Trending list is loaded once per session
    if "trending_movies" not in st.session_state:
        st.session_state.trending_movies = get_trending_movies()

# =============================================================================
# UI STYLING
# =============================================================================

def inject_custom_css():
    """Inject custom CSS for the hero title and movie cards."""
    st.markdown("""
    <style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    .hero-title {
        text-align: center;
        font-size: 2.5rem;
        font-weight: bold;
        margin-bottom: 2rem;
    }

    .text-gradient {
        background: linear-gradient(90deg, #d6c7ff 0%, #ab8bff 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
    }

    .trending-rank {
        font-size: 3rem;
        font-weight: bold;
        color: #ab8bff;
        margin: 0;
    }

    .movie-meta {
        color: #a8b5db;
        font-size: 0.9rem;
    }

    .no-poster {
        background-color: #221f3d;
        height: 300px;
        display: flex;
        align-items: center;
        justify-content: center;
        border-radius: 8px;
        color: #a8b5db;
    }
    </style>
    """, unsafe_allow_html=True)

# =============================================================================
# UI COMPONENTS
# =============================================================================

def render_trending_movies(trending_movies):
    """Render the most searched movies with their rank."""
    if not trending_movies:
        return

    st.markdown("## Trending Movies")
    cols = st.columns(len(trending_movies))
    for index, (col, movie) in enumerate(zip(cols, trending_movies)):
        with col:
            st.markdown(f'<p class="trending-rank">{index + 1}</p>', unsafe_allow_html=True)
            if movie.get("poster_url"):
                st.image(movie["poster_url"], caption=movie.get("search_term"), use_container_width=True)
            else:
                st.write(movie.get("search_term"))

def render_movie_card(movie):
    """Render a single movie: poster, title, rating, language and year."""
    poster_url = get_poster_url(movie)
    if poster_url:
        st.image(poster_url, use_container_width=True)
    else:
        st.markdown('<div class="no-poster">🎬<br>No Poster</div>', unsafe_allow_html=True)

    st.markdown(f"**{movie.get('title', '')}**")
    st.markdown(
        f'<p class="movie-meta">⭐ {format_rating(movie.get("vote_average"))} • '
        f'{movie.get("original_language", "")} • {get_release_year(movie)}</p>',
        unsafe_allow_html=True
    )

def render_movie_grid(movies):
    """Render movies in rows of CARDS_PER_ROW."""
    for start in range(0, len(movies), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, movie in zip(cols, movies[start:start + CARDS_PER_ROW]):
            with col:
                render_movie_card(movie)

def render_results(search_term):
    """Run the search for the current term and render the outcome."""
    st.markdown(f'## Search Results for "{search_term}"' if search_term else "## All Movies")

    try:
        with st.spinner("Loading movies..."):
            movies = run_search(search_term)
    except ConfigurationError as e:
        st.error(f"❌ {e}")
        return
    except SearchFailure:
        st.error(GENERIC_ERROR_MESSAGE)
        return

    if not movies and search_term:
        st.info(f'No movies found for "{search_term}". Try a different search term.')
        return

    render_movie_grid(movies)

# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application function."""
    st.set_page_config(
        page_title="Movie Finder",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    initialize_session_state()
    inject_custom_css()

    st.markdown(
        '<h1 class="hero-title">Find <span class="text-gradient">Movies</span> '
        "You'll Enjoy Without the Hassle</h1>",
        unsafe_allow_html=True
    )

    # Streamlit only submits on enter or blur, so each rerun sees a settled term
    search_term = st.text_input(
        "Search through thousands of movies",
        key="search_term",
        placeholder="Search through thousands of movies"
    )

    if not search_term:
        render_trending_movies(st.session_state.trending_movies)

    render_results(search_term)

if __name__ == "__main__":
    main()
